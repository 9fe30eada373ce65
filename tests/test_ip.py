"""Tests for the integer-programming solver."""

import pytest

pytest.importorskip("mip")

from sudoku_logic.cell import Cell  # noqa: E402
from sudoku_logic.chess import king_conflicts  # noqa: E402
from sudoku_logic.grid import Grid  # noqa: E402
from sudoku_logic.ip import solve_ip  # noqa: E402

from conftest import WIKIPEDIA_SOLUTION, is_valid_solution  # noqa: E402


def test_solve_ip(wikipedia_grid):
    before = wikipedia_grid.clone()
    answer = solve_ip(wikipedia_grid)
    assert answer is not None
    assert answer.to_line() == WIKIPEDIA_SOLUTION
    assert wikipedia_grid == before


def test_solve_ip_respects_eliminated_candidates():
    grid = Grid.from_string(WIKIPEDIA_SOLUTION[:72])
    grid[8, 0] = Cell.from_candidates([2])
    answer = solve_ip(grid)
    assert answer is not None
    assert answer.to_line() == WIKIPEDIA_SOLUTION
    grid[8, 0] = Cell.from_candidates([0, 1])
    assert solve_ip(grid) is None


def test_solve_ip_impossible():
    assert solve_ip(Grid.from_string("11")) is None


def test_solve_ip_anti_king():
    answer = solve_ip(Grid(), kings=True)
    assert answer is not None
    assert is_valid_solution(answer)
    assert not king_conflicts(answer)
