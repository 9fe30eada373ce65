#!/usr/bin/env python

"""
sudoku_logic/grid.py

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

The 9x9 grid of cells.

Cells are held in a flat list of 81, indexed row-major (``row * 9 + col``).
Rows, columns and 3x3 boxes ("groups") are fixed partitions of those indices,
computed once. Strategies work through indices (or through the live
:class:`Cell` objects that a group view returns), so overlapping groups never
need copying.

"""

from typing import Generator, List, Optional, Sequence, Tuple

from sudoku_logic.cell import Cell
from sudoku_logic.common import (
    COL_SEPARATOR,
    DIGITS,
    DISPLAY_SOLVED,
    DISPLAY_UNKNOWN,
    N,
    N_CELLS,
    NEWLINE,
    RANK,
    ROW_SEPARATOR,
    SPACE,
    UNKNOWN,
)


# =============================================================================
# Indexing
# =============================================================================

def cell_index(row_zb: int, col_zb: int) -> int:
    assert 0 <= row_zb < N and 0 <= col_zb < N, (
        f"Bad cell (row={row_zb}, col={col_zb})")
    return row_zb * N + col_zb


def row_col(index: int) -> Tuple[int, int]:
    """
    ``row_zb, col_zb`` for a flat index.
    """
    return divmod(index, N)


# =============================================================================
# Box
# =============================================================================

class Box(object):
    """
    Represents a 3x3 box within the Sudoku grid.
    """
    def __init__(self, box_zb: int) -> None:
        """
        Boxes are numbered 0-8, left to right and then top to bottom.

        Args:
            box_zb: box number, as above; zero-based
        """
        assert 0 <= box_zb < N, (
            f"box_zb was {box_zb}; must be in range 0 to {N - 1} inclusive"
        )
        self.box_zb = box_zb

    def __str__(self) -> str:
        """
        Coordinate-based description for a 3x3 box.
        """
        return f"{{{self.boxrow + 1},{self.boxcol + 1}}}"

    def __repr__(self) -> str:
        return self.__str__()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self.box_zb == other.box_zb

    def __hash__(self) -> int:
        return hash(self.box_zb)

    @property
    def boxrow(self) -> int:
        """
        Zero-based row number of the box (not its cells).
        """
        return self.box_zb // RANK

    @property
    def boxcol(self) -> int:
        """
        Zero-based column number of the box (not its cells).
        """
        return self.box_zb % RANK

    def top_left_cell(self) -> Tuple[int, int]:
        """
        Returns ``row_zb, col_zb`` for the top-left cell in the 3x3 box.
        """
        return self.boxrow * RANK, self.boxcol * RANK

    def extremes(self) -> Tuple[int, int, int, int]:
        """
        Defines the boundaries of the 3x3 box, numbered from 0 to (N - 1).

        Returns ``row_min, row_max, col_min, col_max``.
        """
        row_min, col_min = self.top_left_cell()
        return row_min, row_min + RANK - 1, col_min, col_min + RANK - 1

    @classmethod
    def containing(cls, row_zb: int, col_zb: int) -> "Box":
        """
        Returns the box containing this cell.
        """
        assert 0 <= row_zb < N
        assert 0 <= col_zb < N
        return cls((row_zb // RANK) * RANK + col_zb // RANK)

    def gen_cells(self) -> Generator[Tuple[int, int], None, None]:
        """
        Generates ``(row_zb, col_zb)`` tuples for all the cells in this box.
        """
        row_min, row_max, col_min, col_max = self.extremes()
        for r in range(row_min, row_max + 1):
            for c in range(col_min, col_max + 1):
                yield r, c

    @property
    def indices(self) -> Tuple[int, ...]:
        return tuple(cell_index(r, c) for r, c in self.gen_cells())

    @property
    def rownums(self) -> List[int]:
        """
        Row numbers (zero-based) covered by this box.
        """
        row_min, row_max, _, _ = self.extremes()
        return list(range(row_min, row_max + 1))

    @property
    def colnums(self) -> List[int]:
        """
        Column numbers (zero-based) covered by this box.
        """
        _, _, col_min, col_max = self.extremes()
        return list(range(col_min, col_max + 1))


# =============================================================================
# Groups
# =============================================================================

ROWS = tuple(
    tuple(cell_index(r, c) for c in range(N)) for r in range(N)
)  # type: Tuple[Tuple[int, ...], ...]
COLUMNS = tuple(
    tuple(cell_index(r, c) for r in range(N)) for c in range(N)
)  # type: Tuple[Tuple[int, ...], ...]
BOXES = tuple(
    Box(b).indices for b in range(N)
)  # type: Tuple[Tuple[int, ...], ...]
GROUPS = ROWS + COLUMNS + BOXES  # rows, then columns, then boxes


# =============================================================================
# Grid
# =============================================================================

class Grid(object):
    """
    Represents the whole board.
    """
    def __init__(self, cells: Sequence[Cell] = None) -> None:
        """
        Args:
            cells:
                81 cells, row-major; default is "everything unknown". The
                cells are taken over, not copied.
        """
        if cells is None:
            self.cells = [Cell() for _ in range(N_CELLS)]  # type: List[Cell]
        else:
            assert len(cells) == N_CELLS, (
                f"Need {N_CELLS} cells; got {len(cells)}")
            self.cells = list(cells)

    @classmethod
    def from_string(cls, text: str) -> "Grid":
        """
        Reads a puzzle from 81 characters, row-major. The digits 1-9 are known
        cells; any other character is an unknown cell. Characters beyond the
        81st are ignored; missing characters are unknown cells.
        """
        grid = cls()
        for i, char in enumerate(text[:N_CELLS]):
            if char in DIGITS:
                grid.cells[i] = Cell.from_digit(int(char) - 1)
        return grid

    @classmethod
    def from_values(cls, values: Sequence[Sequence[Optional[int]]]) -> "Grid":
        """
        Reads a puzzle from a list of rows. The incoming digits are genuine
        (one-based), not zero-based; ``None`` is an unknown cell.
        """
        assert len(values) == N
        grid = cls()
        for r, rowlist in enumerate(values):
            assert len(rowlist) == N
            for c, value in enumerate(rowlist):
                if value is not None:
                    grid[r, c] = Cell.from_digit(value - 1)
        return grid

    def clone(self) -> "Grid":
        return self.__class__([cell.clone() for cell in self.cells])

    def assign_from(self, other: "Grid") -> None:
        """
        Copies another grid's state into this one. Used by guessing.
        """
        self.cells = [cell.clone() for cell in other.cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def __getitem__(self, row_col_zb: Tuple[int, int]) -> Cell:
        row_zb, col_zb = row_col_zb
        return self.cells[cell_index(row_zb, col_zb)]

    def __setitem__(self, row_col_zb: Tuple[int, int], cell: Cell) -> None:
        row_zb, col_zb = row_col_zb
        self.cells[cell_index(row_zb, col_zb)] = cell

    def group(self, indices: Sequence[int]) -> List[Cell]:
        """
        The live cells for some indices; changing them changes the grid.
        """
        return [self.cells[i] for i in indices]

    def row(self, row_zb: int) -> List[Cell]:
        return self.group(ROWS[row_zb])

    def column(self, col_zb: int) -> List[Cell]:
        return self.group(COLUMNS[col_zb])

    def box(self, box_zb: int) -> List[Cell]:
        return self.group(BOXES[box_zb])

    def rows(self) -> List[List[Cell]]:
        return [self.group(g) for g in ROWS]

    def columns(self) -> List[List[Cell]]:
        return [self.group(g) for g in COLUMNS]

    def boxes(self) -> List[List[Cell]]:
        return [self.group(g) for g in BOXES]

    # -------------------------------------------------------------------------
    # Predicates and counts
    # -------------------------------------------------------------------------

    def solved(self) -> bool:
        """
        Are we there yet?
        """
        return all(cell.is_solved for cell in self.cells)

    def broken(self) -> bool:
        """
        Is there an unknown cell that can't be anything?
        """
        return any(cell.is_contradiction() for cell in self.cells)

    def conflicts(self) -> List[Tuple[int, ...]]:
        """
        Groups in which the same digit is known twice.
        """
        bad = []  # type: List[Tuple[int, ...]]
        for indices in GROUPS:
            values = [self.cells[i].value for i in indices
                      if self.cells[i].is_solved]
            if len(values) != len(set(values)):
                bad.append(indices)
        return bad

    def has_conflict(self) -> bool:
        return bool(self.conflicts())

    def n_unknown_cells(self) -> int:
        """
        Number of unsolved cells. Maximum is 81.
        """
        return sum(1 for cell in self.cells if not cell.is_solved)

    def n_possibilities_overall(self) -> int:
        """
        Number of row/cell/digit possibilities overall, counting a known cell
        as one. Minimum is 81 (solved). Maximum is 729.
        """
        return sum(1 if cell.is_solved else cell.n_candidates()
                   for cell in self.cells)

    def n_distinct_digits(self) -> int:
        return len(set(cell.value for cell in self.cells if cell.is_solved))

    # -------------------------------------------------------------------------
    # Visuals
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        """
        The board, with known digits and blanks, divided into boxes.
        """
        lines = []  # type: List[str]
        for r in range(N):
            if r % RANK == 0 and r > 0:
                lines.append(ROW_SEPARATOR)
            x = ""
            for c in range(N):
                if c % RANK == 0 and c > 0:
                    x += COL_SEPARATOR
                x += f"{SPACE}{self[r, c]}{SPACE}"
            lines.append(x)
        return NEWLINE.join(lines)

    def to_line(self) -> str:
        """
        Compact 81-character version, readable by :meth:`from_string`.
        """
        return "".join(str(cell.value + 1) if cell.is_solved else UNKNOWN
                       for cell in self.cells)

    @staticmethod
    def _cstr_row_col(row_zb: int, col_zb: int, digit_zb: int) \
            -> Tuple[int, int]:
        """
        For :meth:`candidates_str`: ``row, col`` (``y, x``) coordinates.
        """
        x_base = col_zb * (RANK + 1)
        y_base = row_zb * (RANK + 1)
        x_offset = digit_zb % RANK
        y_offset = digit_zb // RANK
        return (y_base + y_offset), (x_base + x_offset)

    def candidates_str(self) -> str:
        """
        Returns a visual representation of what each cell could be.
        """
        pn = N * 4 - 1
        t = RANK

        # Create grid of characters
        strings = [[SPACE for _ in range(pn)]
                   for _ in range(pn)]  # type: List[List[str]]

        # Prettify
        cell_boundaries = ((t + 1) * t - 1, (t + 1) * (t * 2) - 1)
        for r in cell_boundaries:
            for i in range(pn):
                strings[r][i] = "-"
        for c in cell_boundaries:
            for i in range(pn):
                strings[i][c] = "|"
        for r in cell_boundaries:
            for c in cell_boundaries:
                strings[r][c] = "+"

        # Data
        for r in range(N):
            for c in range(N):
                cell = self[r, c]
                for d_zb in range(N):
                    y, x = self._cstr_row_col(r, c, d_zb)
                    if cell.value == d_zb or cell.has_candidate(d_zb):
                        txt = str(d_zb + 1)
                    elif cell.is_solved:
                        txt = DISPLAY_SOLVED
                    else:
                        txt = DISPLAY_UNKNOWN
                    strings[y][x] = txt
        return NEWLINE.join("".join(line) for line in strings)
