#!/usr/bin/env python

"""
sudoku_logic/main.py

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

**Solves Sudoku puzzles from the command line.**

It uses two approaches:

- Tedious logic, like a human would do, showing the working; guessing (with
  the same logic to follow through each guess) when the logic runs out.

- Integer programming, as a check.

Both can add the "anti-king" and "anti-knight" rules.

"""

import argparse
import logging
import sys
from typing import List

from cardinal_pythonlib.argparse_func import RawDescriptionArgumentDefaultsHelpFormatter  # noqa
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from sudoku_logic.chess import king_conflicts, kings, knight_conflicts, knights
from sudoku_logic.common import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    HASH,
    N,
    run_guard,
)
from sudoku_logic.grid import Grid
from sudoku_logic.solver import Solver
from sudoku_logic.strategies import ADVANCED_STRATEGIES, DEFAULT_STRATEGIES

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

DEMO_SUDOKU_1 = """
# Coton 54, Coton Community News Dec 2019-Jan 2020

... ... ...
..2 3.1 45.
.1. ... .6.

.47 .5. 38.
... 7.3 ...
.36 ... 14.

.7. ... .9.
.91 4.5 6..
... ..9 ...
"""

STDIN = "-"


# =============================================================================
# Input
# =============================================================================

def clean_puzzle_text(text: str) -> str:
    """
    Removes comment lines (starting ``#``) and all whitespace. Anything else
    is left for :meth:`Grid.from_string` to interpret.
    """
    lines = [line for line in text.splitlines() if not line.startswith(HASH)]
    return "".join("".join(line.split()) for line in lines)


def read_puzzle(text: str) -> Grid:
    """
    Creates a grid from puzzle text, e.g. as in :data:`DEMO_SUDOKU_1`.
    """
    grid = Grid.from_string(clean_puzzle_text(text))
    n_distinct = grid.n_distinct_digits()
    if n_distinct < N - 1:
        log.warning(
            f"Not a well-formed Sudoku: {n_distinct} distinct initial "
            f"values given, but need {N - 1} to be well-formed.")
        # http://pi.math.cornell.edu/~mec/Summer2009/Mahmood/More.html
        # Need (rank ^ 2 - 1) distinct values, i.e. (n - 1) values.
    return grid


def read_puzzle_file(filename: str) -> Grid:
    """
    Reads a puzzle from a file, or from stdin for ``-``.
    """
    if filename == STDIN:
        log.info("Reading from stdin")
        return read_puzzle(sys.stdin.read())
    log.info(f"Reading {filename}")
    with open(filename, "rt") as f:
        return read_puzzle(f.read())


# =============================================================================
# Solving
# =============================================================================

def make_solver(advanced: bool = False,
                with_kings: bool = False,
                with_knights: bool = False,
                max_depth: int = None) -> Solver:
    """
    Assembles a solver from the standard strategies plus those requested.
    """
    solver = Solver(strategies=DEFAULT_STRATEGIES,
                    note=log.info,
                    max_depth=max_depth)
    if advanced:
        for strategy in ADVANCED_STRATEGIES:
            solver.add_strategy(strategy)
    if with_kings:
        solver.add_strategy(kings)
        solver.add_check(king_conflicts)
    if with_knights:
        solver.add_strategy(knights)
        solver.add_check(knight_conflicts)
    return solver


def solve_logic(grid: Grid, solver: Solver, no_guess: bool = False) -> bool:
    """
    Solve via conventional logic, showing our working.

    Returns: solved?
    """
    solved = solver.solve(grid, no_guess=no_guess)
    if not solved:
        log.debug(f"Possibilities:\n{grid.candidates_str()}")
        if grid.broken() or grid.has_conflict():
            log.error("Puzzle is contradictory")
        elif no_guess:
            log.error("Would need to guess, but prohibited")
        else:
            log.error("Unable to solve!")
    return solved


def solve_integer_programming(grid: Grid, with_kings: bool = False,
                              with_knights: bool = False) -> bool:
    """
    Solve via integer programming, writing the answer into ``grid``.

    Returns: solved?
    """
    from sudoku_logic.ip import solve_ip
    answer = solve_ip(grid, kings=with_kings, knights=with_knights)
    if answer is None:
        return False
    grid.assign_from(answer)
    log.info("Solved via integer programming method")
    return True


# =============================================================================
# main
# =============================================================================

def main(argv: List[str] = None) -> None:
    """
    Command-line entry point.
    """
    cmd_demo = "demo"
    cmd_solve = "solve"
    cmd_working = "working"

    help_filename = (
        f"Puzzle filename to read ({STDIN!r} for stdin). Must contain text "
        f"in format as above.")

    parser = argparse.ArgumentParser(
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
        description=(
            f"Solve Sudoku puzzles. Format is:\n\n"
            f"{DEMO_SUDOKU_1}\n"
            f"Digits 1-9 are known cells; any other character is an unknown "
            f"cell. Whitespace and lines starting {HASH!r} are ignored. Only "
            f"the first {N * N} cells are read."
        )
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Be verbose")
    subparsers = parser.add_subparsers(
        dest="command",
        help="Append --help for more help")

    def add_variant_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--kings", action="store_true",
            help="Add the anti-king rule: no digit repeats a king's move "
                 "away")
        p.add_argument(
            "--knights", action="store_true",
            help="Add the anti-knight rule: no digit repeats a knight's move "
                 "away")

    def add_logic_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--advanced", action="store_true",
            help="Also use hidden tuples, pointing and claiming")
        p.add_argument(
            "--maxdepth", type=int, default=None,
            help="Maximum guessing depth (default: no limit)")
        add_variant_args(p)

    parser_solve = subparsers.add_parser(
        cmd_solve, help="Solve from a file, via integer programming")
    parser_solve.add_argument(
        "filename", type=str, nargs="?", default=STDIN, help=help_filename)
    add_variant_args(parser_solve)

    parser_working = subparsers.add_parser(
        cmd_working,
        help="Solve from a file, via puzzle logic, showing working")
    parser_working.add_argument(
        "filename", type=str, nargs="?", default=STDIN, help=help_filename)
    parser_working.add_argument(
        "--noguess", action="store_true", help="Prevent guessing")
    add_logic_args(parser_working)

    parser_demo = subparsers.add_parser(cmd_demo, help="Run demo")
    add_logic_args(parser_demo)

    args = parser.parse_args(argv)
    main_only_quicksetup_rootlogger(level=logging.DEBUG if args.verbose
                                    else logging.INFO)

    if not args.command:
        print("Must specify command")
        sys.exit(EXIT_FAILURE)
    if args.command == cmd_demo:
        grid = read_puzzle(DEMO_SUDOKU_1)
    else:
        grid = read_puzzle_file(args.filename)
    log.info(f"Solving:\n{grid}")

    if args.command == cmd_solve:
        solved = solve_integer_programming(grid,
                                           with_kings=args.kings,
                                           with_knights=args.knights)
    else:
        solver = make_solver(advanced=args.advanced,
                             with_kings=args.kings,
                             with_knights=args.knights,
                             max_depth=args.maxdepth)
        solved = solve_logic(grid, solver,
                             no_guess=getattr(args, "noguess", False))

    log.info(f"Answer:\n{grid}")
    sys.exit(EXIT_SUCCESS if solved else EXIT_FAILURE)


def cli() -> None:
    """
    Console-script entry point.
    """
    run_guard(main)


# =============================================================================
# Command-line entry point
# =============================================================================

if __name__ == "__main__":
    cli()
