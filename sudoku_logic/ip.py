#!/usr/bin/env python

"""
sudoku_logic/ip.py

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

**Solves a grid via integer programming.**

This is close to magic. You say "here are my constraints; go" and a few
milliseconds later you have a valid answer. It shows no working, but it's a
useful check on the logic.

"""

import logging
from typing import Optional

from mip import BINARY, Constr, Model, Var, xsum

from sudoku_logic.cell import Cell
from sudoku_logic.chess import KING_OFFSETS, KNIGHT_OFFSETS, gen_neighbours
from sudoku_logic.common import ALMOST_ONE, N
from sudoku_logic.grid import GROUPS, Grid, row_col

log = logging.getLogger(__name__)


# =============================================================================
# Functions for mip models
# =============================================================================

def debug_model_constraints(m: Model) -> None:
    """
    Shows constraints for a model.
    """
    lines = [f"Constraints in model {m.name!r}:"]
    for c in m.constrs:  # type: Constr
        lines.append(f"{c.name} == {c.expr}")
    log.debug("\n".join(lines))


def debug_model_vars(m: Model) -> None:
    """
    Show the names/values of model variables after fitting.
    """
    lines = [f"Variables in model {m.name!r}:"]
    for v in m.vars:  # type: Var
        lines.append(f"{v.name} == {v.x}")
    log.debug("\n".join(lines))


# =============================================================================
# Solve via integer programming
# =============================================================================

def solve_ip(grid: Grid, kings: bool = False,
             knights: bool = False) -> Optional[Grid]:
    """
    Solves the grid.

    Known cells are fixed, and candidates already eliminated stay eliminated.

    Args:
        grid: the grid (not changed)
        kings: no digit may repeat a king's move away
        knights: no digit may repeat a knight's move away

    Returns:
        a solved grid, or ``None`` if there is no solution
    """
    m = Model("Sudoku solver")
    m.verbose = 0

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Variables
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    x = [
        [
            m.add_var(f"x(row={i // N + 1}, col={i % N + 1}, digit={d + 1})",
                      var_type=BINARY)
            for d in range(N)
        ] for i in range(N * N)
    ]  # index as: x[cell_index][digit_zb]

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Constraints
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # One digit per cell
    for i in range(N * N):
        m += xsum(x[i][d] for d in range(N)) == 1
    # One of each digit per row, column and 3x3 box
    for d in range(N):
        for indices in GROUPS:
            m += xsum(x[i][d] for i in indices) == 1
    # Chess-move neighbours differ
    offsets = []
    if kings:
        offsets.extend(KING_OFFSETS)
    if knights:
        offsets.extend(KNIGHT_OFFSETS)
    for i in range(N * N):
        r, c = row_col(i)
        for rr, cc in gen_neighbours(r, c, offsets):
            j = rr * N + cc
            if j <= i:
                continue  # each pair once
            for d in range(N):
                m += x[i][d] + x[j][d] <= 1
    # Starting values, and what we've already ruled out
    for i, cell in enumerate(grid.cells):
        if cell.is_solved:
            m += x[i][cell.value] == 1
        else:
            for d in range(N):
                if not cell.has_candidate(d):
                    m += x[i][d] == 0

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Solve
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    debug_model_constraints(m)
    m.optimize()

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Read out answers
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    if not m.num_solutions:
        log.error("Unable to solve!")
        return None
    debug_model_vars(m)
    cells = []
    for i in range(N * N):
        digit_zb = next(d for d in range(N) if x[i][d].x > ALMOST_ONE)
        cells.append(Cell.from_digit(digit_zb))
    return Grid(cells)
