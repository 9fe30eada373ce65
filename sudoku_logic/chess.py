#!/usr/bin/env python

"""
sudoku_logic/chess.py

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

**Chess-move variants.**

"Anti-king" and "anti-knight" Sudoku add a rule: two cells a king's move (or a
knight's move) apart may not hold the same digit. Each rule comes as a
strategy, to add to a solver's pipeline, and a check, so a solver can reject
finished grids that break it.

"""

import logging
from typing import Generator, Sequence, Tuple

from sudoku_logic.common import N
from sudoku_logic.grid import Grid

log = logging.getLogger(__name__)

KING_OFFSETS = tuple(
    (dr, dc)
    for dr in (-1, 0, 1)
    for dc in (-1, 0, 1)
    if (dr, dc) != (0, 0)
)  # type: Tuple[Tuple[int, int], ...]
KNIGHT_OFFSETS = (
    (-2, -1), (-2, 1),
    (-1, -2), (-1, 2),
    (1, -2), (1, 2),
    (2, -1), (2, 1),
)  # type: Tuple[Tuple[int, int], ...]


def gen_neighbours(row_zb: int, col_zb: int,
                   offsets: Sequence[Tuple[int, int]]) \
        -> Generator[Tuple[int, int], None, None]:
    """
    Generates ``(row_zb, col_zb)`` for cells at the given offsets that are on
    the board.
    """
    for dr, dc in offsets:
        r = row_zb + dr
        c = col_zb + dc
        if 0 <= r < N and 0 <= c < N:
            yield r, c


def _eliminate_by_offsets(grid: Grid,
                          offsets: Sequence[Tuple[int, int]]) -> bool:
    improved = False
    for r in range(N):
        for c in range(N):
            cell = grid[r, c]
            if not cell.is_solved:
                continue
            for rr, cc in gen_neighbours(r, c, offsets):
                improved = (grid[rr, cc].remove_candidate(cell.value) or
                            improved)
    return improved


def _conflict_by_offsets(grid: Grid,
                         offsets: Sequence[Tuple[int, int]]) -> bool:
    for r in range(N):
        for c in range(N):
            cell = grid[r, c]
            if not cell.is_solved:
                continue
            for rr, cc in gen_neighbours(r, c, offsets):
                if grid[rr, cc].value == cell.value:
                    return True
    return False


def kings(grid: Grid) -> bool:
    """
    Eliminates each known digit from the cells a king's move away.

    Returns: improved?
    """
    log.debug("Searching for kings...")
    return _eliminate_by_offsets(grid, KING_OFFSETS)


def knights(grid: Grid) -> bool:
    """
    Eliminates each known digit from the cells a knight's move away.

    Returns: improved?
    """
    log.debug("Searching for knights...")
    return _eliminate_by_offsets(grid, KNIGHT_OFFSETS)


def king_conflicts(grid: Grid) -> bool:
    """
    Are two cells a king's move apart known to hold the same digit?
    """
    return _conflict_by_offsets(grid, KING_OFFSETS)


def knight_conflicts(grid: Grid) -> bool:
    """
    Are two cells a knight's move apart known to hold the same digit?
    """
    return _conflict_by_offsets(grid, KNIGHT_OFFSETS)
