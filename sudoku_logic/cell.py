#!/usr/bin/env python

"""
sudoku_logic/cell.py

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

A single Sudoku cell: either a known digit, or a set of possible digits.

Digits are ZERO-BASED throughout (0-8 for the puzzle's 1-9).

"""

from typing import Iterable, List, Optional, Sequence, Tuple

from sudoku_logic.common import N, PLACEHOLDER


# =============================================================================
# Cell
# =============================================================================

class Cell(object):
    """
    Represents one position in the grid.

    - Solved: :attr:`value` is the digit, and there are no candidates.
    - Unsolved: :attr:`value` is ``None`` and :attr:`possible` holds one flag
      per digit. An unsolved cell with no flags set is a contradiction; that
      is a legal (but hopeless) state, not an error.
    """
    def __init__(self, value: int = None,
                 possible: Sequence[bool] = None) -> None:
        """
        Args:
            value:
                zero-based digit, for a solved cell
            possible:
                for an unsolved cell, one flag per digit; default is
                "everything is possible"
        """
        if value is not None:
            assert 0 <= value < N, f"Bad digit {value}"
            assert possible is None, "Solved cells have no candidates"
            self.value = value  # type: Optional[int]
            self.possible = [False] * N  # type: List[bool]
        else:
            self.value = None
            if possible is None:
                self.possible = [True] * N
            else:
                assert len(possible) == N
                self.possible = [bool(x) for x in possible]

    @classmethod
    def from_digit(cls, digit_zb: int) -> "Cell":
        return cls(value=digit_zb)

    @classmethod
    def from_candidates(cls, digits_zb: Iterable[int]) -> "Cell":
        digits = set(digits_zb)
        return cls(possible=[d in digits for d in range(N)])

    def clone(self) -> "Cell":
        if self.is_solved:
            return self.__class__(value=self.value)
        return self.__class__(possible=self.possible)

    # -------------------------------------------------------------------------
    # Comparison and display
    # -------------------------------------------------------------------------

    def key(self) -> Tuple:
        """
        Structural identity: two unsolved cells with the same candidates are
        the same, as are two solved cells with the same digit.
        """
        if self.is_solved:
            return True, self.value
        return False, tuple(self.possible)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __str__(self) -> str:
        return str(self.value + 1) if self.is_solved else PLACEHOLDER

    def __repr__(self) -> str:
        if self.is_solved:
            return f"Cell(solved={self.value + 1})"
        return f"Cell(candidates={[d + 1 for d in self.candidates()]})"

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def is_solved(self) -> bool:
        return self.value is not None

    def candidates(self) -> List[int]:
        """
        Possible digits, zero-based, in ascending order. Empty for a solved
        cell.
        """
        return [d for d, v in enumerate(self.possible) if v]

    def n_candidates(self) -> int:
        return sum(self.possible)

    def has_candidate(self, digit_zb: int) -> bool:
        return self.possible[digit_zb]

    def is_contradiction(self) -> bool:
        """
        Unsolved, with nothing left that it could be?
        """
        return not self.is_solved and not any(self.possible)

    # -------------------------------------------------------------------------
    # Changes
    # -------------------------------------------------------------------------

    def remove_candidate(self, digit_zb: int) -> bool:
        """
        Eliminates a digit as a possibility.

        Returns: improved? (Always ``False`` for a solved cell.)
        """
        if not self.possible[digit_zb]:
            return False
        self.possible[digit_zb] = False
        return True

    def restrict_to(self, digits_zb_to_keep: Iterable[int]) -> bool:
        """
        Removes every candidate not in the set given.

        Returns: improved?
        """
        keep = set(digits_zb_to_keep)
        improved = False
        for d in range(N):
            if d not in keep:
                improved = self.remove_candidate(d) or improved
        return improved

    def solve_as(self, digit_zb: int) -> None:
        """
        Marks the cell as known.
        """
        assert 0 <= digit_zb < N, f"Bad digit {digit_zb}"
        self.value = digit_zb
        self.possible = [False] * N
