#!/usr/bin/env python

"""
sudoku_logic/solver.py

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

**Drives the strategies, and guesses when they run out.**

Strategy:

1.  Attempt to solve current state of puzzle analytically, trying the
    strategies in order and starting again from the top whenever one of them
    makes progress.

2.  If unsolved, guess one value and attempt to solve that, recursively,
    until all possible uncertain values have been guessed or a solution has
    been found.

"""

import logging
from typing import Callable, Iterable, List, Optional

from sudoku_logic.common import NoteSink, rc_str
from sudoku_logic.grid import Grid, row_col
from sudoku_logic.strategies import DEFAULT_STRATEGIES, Strategy

log = logging.getLogger(__name__)

Check = Callable[[Grid], bool]


def describe_strategy(strategy: Strategy) -> str:
    """
    "naked_singles" becomes "Naked singles".
    """
    name = getattr(strategy, "__name__", repr(strategy))
    return name.replace("_", " ").capitalize()


# =============================================================================
# Solver
# =============================================================================

class Solver(object):
    """
    An ordered pipeline of strategies, plus guessing.
    """
    def __init__(self,
                 strategies: Iterable[Strategy] = None,
                 checks: Iterable[Check] = None,
                 note: NoteSink = None,
                 max_depth: int = None) -> None:
        """
        Args:
            strategies:
                strategies in priority order; default is
                :data:`DEFAULT_STRATEGIES`
            checks:
                extra rules to enforce when guessing, as functions returning
                ``True`` if the grid breaks the rule; the "no digit twice in a
                row, column or box" rule is always present
            note:
                optional function to receive our working, as text
            max_depth:
                optional limit on how many guesses deep we may go
        """
        if strategies is None:
            strategies = DEFAULT_STRATEGIES
        self.strategies = list(strategies)  # type: List[Strategy]
        self.checks = [Grid.has_conflict]  # type: List[Check]
        self.checks.extend(checks or [])
        self.note_sink = note
        self.max_depth = max_depth

    def add_strategy(self, strategy: Strategy) -> None:
        self.strategies.append(strategy)

    def add_check(self, check: Check) -> None:
        self.checks.append(check)

    # -------------------------------------------------------------------------
    # Show your working
    # -------------------------------------------------------------------------

    def note(self, msg: str) -> None:
        """
        Report some working, if anyone is listening.
        """
        log.debug(msg)
        if self.note_sink is not None:
            self.note_sink(msg)

    # -------------------------------------------------------------------------
    # Logic
    # -------------------------------------------------------------------------

    def step(self, grid: Grid) -> bool:
        """
        Tries each strategy in turn, stopping at the first that helps.

        Returns: improved?
        """
        for strategy in self.strategies:
            if strategy(grid):
                self.note(describe_strategy(strategy))
                return True
        return False

    def dead(self, grid: Grid) -> bool:
        """
        Is this grid hopeless: a cell with no possibilities, or a rule already
        broken?
        """
        return grid.broken() or any(check(grid) for check in self.checks)

    # -------------------------------------------------------------------------
    # Guessing
    # -------------------------------------------------------------------------

    @staticmethod
    def choose_cell(grid: Grid) -> Optional[int]:
        """
        The index of the unknown cell with fewest possibilities (the first
        such, in row-major order), or ``None`` if every cell is known.
        """
        best = None  # type: Optional[int]
        best_n = 0
        for i, cell in enumerate(grid.cells):
            if cell.is_solved:
                continue
            n = cell.n_candidates()
            if best is None or n < best_n:
                best = i
                best_n = n
        return best

    def backtrack(self, grid: Grid, depth: int = 0) -> bool:
        """
        Implements the "guess" method! Picks the most constrained unknown cell
        and tries each of its possibilities in turn, on a copy of the grid,
        following through with the strategies and guessing again as needed.

        On success, ``grid`` takes on the solved state. On failure, ``grid``
        is unchanged.

        Using this means that the strategies have deficiencies (or the puzzle
        does).

        Args:
            grid: the grid
            depth: how many guesses we are already inside

        Returns: solved?
        """
        target = self.choose_cell(grid)
        if target is None:
            return False
        if self.max_depth is not None and depth >= self.max_depth:
            log.warning(f"Not guessing beyond depth {self.max_depth}")
            return False
        r, c = row_col(target)
        guess_level = depth + 1
        for d in grid.cells[target].candidates():
            copy = grid.clone()
            copy.cells[target].solve_as(d)
            self.note(f"Guess level {guess_level}: "
                      f"trying {d + 1} at {rc_str(r, c)}")
            if self._follow_through(copy, depth=guess_level):
                log.info(f"Guess level {guess_level} was good")
                grid.assign_from(copy)
                return True
            self.note(f"Bad guess at level {guess_level}; moving on")
        return False

    def _follow_through(self, grid: Grid, depth: int) -> bool:
        """
        Applies logic to a guessed grid until it's solved, hopeless, or
        stuck; if stuck, guesses again.

        Returns: solved?
        """
        while True:
            if self.dead(grid):
                return False
            if grid.solved():
                return True
            if not self.step(grid):
                return self.backtrack(grid, depth=depth)

    # -------------------------------------------------------------------------
    # Whole thing
    # -------------------------------------------------------------------------

    def solve(self, grid: Grid, no_guess: bool = False) -> bool:
        """
        Solves by elimination, then by guessing if required.

        Args:
            grid: the grid, changed in place
            no_guess: prohibit guessing

        Returns: solved (without breaking any rules)?
        """
        iteration = 0
        while not grid.solved():
            log.debug(
                f"Iteration {iteration}. "
                f"Unsolved cells: {grid.n_unknown_cells()}. "
                f"Possible digit assignments: "
                f"{grid.n_possibilities_overall()} "
                f"(target {len(grid.cells)}).")
            if self.dead(grid):
                self.note("Puzzle is contradictory")
                return False
            if not self.step(grid):
                self.note("No improvement; need to guess")
                if no_guess:
                    return False
                if not self.backtrack(grid):
                    self.note("No guess works")
                    return False
            iteration += 1
        return not self.dead(grid)
