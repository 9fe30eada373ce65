"""
Shared puzzles for the tests.
"""

import pytest

from sudoku_logic.common import N
from sudoku_logic.grid import GROUPS, Grid

# https://en.wikipedia.org/wiki/Sudoku
WIKIPEDIA_PUZZLE = (
    "53..7...."
    "6..195..."
    ".98....6."
    "8...6...3"
    "4..8.3..1"
    "7...2...6"
    ".6....28."
    "...419..5"
    "....8..79"
)
WIKIPEDIA_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def is_valid_solution(grid: Grid) -> bool:
    if not grid.solved():
        return False
    for indices in GROUPS:
        if sorted(grid.cells[i].value for i in indices) != list(range(N)):
            return False
    return True


@pytest.fixture
def wikipedia_grid() -> Grid:
    return Grid.from_string(WIKIPEDIA_PUZZLE)


@pytest.fixture
def top_rows_grid() -> Grid:
    """
    The top three rows of a valid solution, and nothing else: plenty of ways
    to finish it, but no logic to get started.
    """
    return Grid.from_string(WIKIPEDIA_SOLUTION[:27])
