#!/usr/bin/env python

"""
sudoku_logic/strategies.py

===============================================================================

    Copyright (C) 2019-2019 Rudolf Cardinal (rudolf@pobox.com).

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <http://www.gnu.org/licenses/>.

===============================================================================

**Logical deduction strategies.**

Each strategy is a plain function taking a :class:`Grid`, changing it in
place, and returning "improved?". A strategy applies its technique across the
whole grid until the technique has nothing more to say, so calling it again
straight away returns ``False``.

Sudoku Snake technique names (http://www.sudokusnake.com/techniques.php):

- Beginner:

  - Naked Singles: :func:`naked_singles`
  - Hidden Singles (and Hidden Singles by Box): :func:`hidden_singles`
  - Pointing: :func:`pointing_tuples`
  - Claiming: :func:`claiming`

- Intermediate:

  - Naked Subsets: :func:`naked_tuples`
  - Hidden Subsets: :func:`hidden_tuples`

"""

from collections import Counter
from itertools import combinations
import logging
from typing import Callable, Dict, List, Sequence

from sudoku_logic.cell import Cell
from sudoku_logic.common import N
from sudoku_logic.grid import Box, COLUMNS, GROUPS, Grid, ROWS, row_col

log = logging.getLogger(__name__)

Strategy = Callable[[Grid], bool]

HIDDEN_TUPLE_SIZES = (2, 3, 4)


# =============================================================================
# Helpers
# =============================================================================

def _until_stable(one_pass: Strategy, grid: Grid) -> bool:
    """
    Repeats a single pass of a technique until it stops helping.

    Returns: improved?
    """
    improved = False
    while one_pass(grid):
        improved = True
    return improved


def _known_digits(cells: Sequence[Cell]) -> List[int]:
    return [cell.value for cell in cells if cell.is_solved]


def _holders(cells: Sequence[Cell]) -> Dict[int, List[int]]:
    """
    For each digit not yet known in the group, the positions (within the
    group) of the cells that could hold it.
    """
    known = set(_known_digits(cells))
    return {
        d: [i for i, cell in enumerate(cells) if cell.has_candidate(d)]
        for d in range(N)
        if d not in known
    }


# =============================================================================
# Naked singles
# =============================================================================

def naked_singles(grid: Grid) -> bool:
    """
    Where a cell has only one possibility, that's its digit.

    Returns: improved?
    """
    log.debug("Searching for naked singles...")
    improved = False
    for cell in grid.cells:
        if not cell.is_solved and cell.n_candidates() == 1:
            cell.solve_as(cell.candidates()[0])
            improved = True
    return improved


# =============================================================================
# Basic elimination
# =============================================================================

def _eliminate_known(cells: Sequence[Cell]) -> bool:
    improved = False
    for d in _known_digits(cells):
        for cell in cells:
            improved = cell.remove_candidate(d) or improved
    return improved


def basic_elimination(grid: Grid) -> bool:
    """
    Where a cell is known, eliminate its digit from the other cells in its
    row, column and 3x3 box.

    Returns: improved?
    """
    log.debug("Eliminating, simple...")
    improved = False
    for indices in GROUPS:
        improved = _eliminate_known(grid.group(indices)) or improved
    return improved


# =============================================================================
# Hidden singles
# =============================================================================

def _hidden_singles_pass(grid: Grid) -> bool:
    improved = False
    for indices in GROUPS:
        cells = grid.group(indices)
        for d, positions in _holders(cells).items():
            if len(positions) == 1:
                cell = cells[positions[0]]
                if cell.restrict_to([d]):
                    r, c = row_col(indices[positions[0]])
                    log.debug(f"Only possibility for digit {d + 1} in its "
                              f"group is (row={r + 1}, col={c + 1})")
                    improved = True
    return improved


def hidden_singles(grid: Grid) -> bool:
    """
    Where there is only one location for a digit in a row, column, or box,
    that cell can't be anything else. (It becomes a naked single, for
    :func:`naked_singles` to pick up.)

    Returns: improved?
    """
    log.debug("Searching for hidden singles...")
    return _until_stable(_hidden_singles_pass, grid)


# =============================================================================
# Naked tuples
# =============================================================================

def _naked_tuples_pass(grid: Grid) -> bool:
    improved = False
    for indices in GROUPS:
        cells = grid.group(indices)
        counts = Counter(cell for cell in cells if not cell.is_solved)
        tuples = [
            cell.candidates()
            for cell, count in counts.items()
            if 0 < cell.n_candidates() == count
        ]
        for digits in tuples:
            for cell in cells:
                if cell.candidates() == digits:
                    continue
                for d in digits:
                    improved = cell.remove_candidate(d) or improved
    return improved


def naked_tuples(grid: Grid) -> bool:
    """
    If k cells in a group have the same k possibilities, those digits are
    used up by those cells, so no other cell in the group can have them.

    Example: in row 1, if two cells can each only be 4 or 8, one is 4 and the
    other 8, so nothing else in row 1 can be 4 or 8.

    Returns: improved?
    """
    log.debug("Searching for naked tuples...")
    return _until_stable(_naked_tuples_pass, grid)


# =============================================================================
# Hidden tuples
# =============================================================================

def _hidden_tuples_pass(grid: Grid) -> bool:
    improved = False
    for indices in GROUPS:
        cells = grid.group(indices)
        for groupsize in HIDDEN_TUPLE_SIZES:
            holders = _holders(cells)
            eligible = [d for d, positions in holders.items()
                        if 1 <= len(positions) <= groupsize]
            for digit_combo in combinations(eligible, groupsize):
                positions = set(i for d in digit_combo for i in holders[d])
                if len(positions) != groupsize:
                    continue
                for i in sorted(positions):
                    if cells[i].restrict_to(digit_combo):
                        r, c = row_col(indices[i])
                        log.debug(
                            f"Hidden tuple {[d + 1 for d in digit_combo]}: "
                            f"restricting (row={r + 1}, col={c + 1})")
                        improved = True
    return improved


def hidden_tuples(grid: Grid) -> bool:
    """
    If k digits in a group can only go in the same k cells (between them),
    those cells can't hold anything else.

    Example: in row 1, if digit 4 could be in columns 5/7 only, and digit 8
    could be in columns 5/7 only, then either '4' goes in column 5 and '8'
    goes in column 7, or vice versa - but these cells can't possibly contain
    anything other than '4' or '8'.

    Only digits still unplaced in the group count; tuples of 2 to 4 digits are
    checked.

    Returns: improved?
    """
    log.debug("Searching for hidden tuples...")
    return _until_stable(_hidden_tuples_pass, grid)


# =============================================================================
# Pointing and claiming
# =============================================================================

def _pointing_pass(grid: Grid) -> bool:
    improved = False
    for b in range(N):
        box = Box(b)
        box_cells = list(box.gen_cells())
        known = set(grid[r, c].value for r, c in box_cells
                    if grid[r, c].is_solved)
        for d in range(N):
            if d in known:
                continue
            places = [(r, c) for r, c in box_cells
                      if grid[r, c].has_candidate(d)]
            if not places:
                continue
            rows = set(r for r, _ in places)
            cols = set(c for _, c in places)
            if len(rows) == 1:
                r = rows.pop()
                for c in range(N):
                    if c not in box.colnums:
                        if grid[r, c].remove_candidate(d):
                            log.debug(
                                f"Pointing in box {box}: eliminating {d + 1} "
                                f"from (row={r + 1}, col={c + 1})")
                            improved = True
            if len(cols) == 1:
                c = cols.pop()
                for r in range(N):
                    if r not in box.rownums:
                        if grid[r, c].remove_candidate(d):
                            log.debug(
                                f"Pointing in box {box}: eliminating {d + 1} "
                                f"from (row={r + 1}, col={c + 1})")
                            improved = True
    return improved


def pointing_tuples(grid: Grid) -> bool:
    """
    If we don't know where the 5 is in a particular 3x3 box, but we know that
    it's in the first row of that box, then we can eliminate "5" from the rest
    of that row, in other boxes. Likewise for columns.

    Returns: improved?
    """
    log.debug("Eliminating, pointing...")
    return _until_stable(_pointing_pass, grid)


def _claiming_pass(grid: Grid) -> bool:
    improved = False
    for indices in ROWS + COLUMNS:
        cells = grid.group(indices)
        for d, positions in _holders(cells).items():
            if not positions:
                continue
            boxes = set(Box.containing(*row_col(indices[i]))
                        for i in positions)
            if len(boxes) != 1:
                continue
            box = boxes.pop()
            for i in box.indices:
                if i not in indices and grid.cells[i].remove_candidate(d):
                    r, c = row_col(i)
                    log.debug(f"Claiming for box {box}: eliminating {d + 1} "
                              f"from (row={r + 1}, col={c + 1})")
                    improved = True
    return improved


def claiming(grid: Grid) -> bool:
    """
    The reverse of :func:`pointing_tuples`: if, within a row, the 5 can only
    be in cells belonging to one 3x3 box, then the 5 in that box is in that
    row, and we can eliminate "5" from the rest of that box. Likewise for
    columns.

    Returns: improved?
    """
    log.debug("Eliminating, claiming...")
    return _until_stable(_claiming_pass, grid)


# =============================================================================
# Collections
# =============================================================================

STRATEGIES = {
    f.__name__: f
    for f in (naked_singles, basic_elimination, hidden_singles,
              naked_tuples, hidden_tuples, pointing_tuples, claiming)
}  # type: Dict[str, Strategy]

# Cheapest and most certain first.
DEFAULT_STRATEGIES = [
    naked_singles,
    basic_elimination,
    hidden_singles,
    naked_tuples,
]  # type: List[Strategy]

ADVANCED_STRATEGIES = [
    hidden_tuples,
    pointing_tuples,
    claiming,
]  # type: List[Strategy]
