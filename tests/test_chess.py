"""Unit tests for the chess-move variant rules."""

from sudoku_logic.cell import Cell
from sudoku_logic.chess import (
    KNIGHT_OFFSETS,
    gen_neighbours,
    king_conflicts,
    kings,
    knight_conflicts,
    knights,
)
from sudoku_logic.grid import Grid


def _lost_zero(grid: Grid, cells) -> bool:
    return all(not grid[r, c].has_candidate(0) for r, c in cells)


def test_kings():
    grid = Grid()
    grid[0, 0] = Cell.from_digit(0)
    grid[4, 4] = Cell.from_digit(0)
    grid[8, 8] = Cell.from_digit(0)

    assert kings(grid)

    assert _lost_zero(grid, [(1, 0), (1, 1), (0, 1)])
    assert _lost_zero(grid, [(3, 3), (3, 4), (3, 5), (4, 3), (4, 5),
                             (5, 3), (5, 4), (5, 5)])
    assert _lost_zero(grid, [(7, 7), (7, 8), (8, 7)])
    assert grid[0, 2].has_candidate(0)
    assert grid[2, 2].has_candidate(0)
    assert grid.n_possibilities_overall() == 3 + 78 * 9 - 14


def test_knights_use_canonical_offsets():
    assert sorted(set((abs(dr), abs(dc)) for dr, dc in KNIGHT_OFFSETS)) == [
        (1, 2), (2, 1)]
    assert len(set(KNIGHT_OFFSETS)) == 8

    grid = Grid()
    grid[4, 4] = Cell.from_digit(0)
    grid[0, 0] = Cell.from_digit(1)

    assert knights(grid)

    centre = [(2, 3), (2, 5), (3, 2), (3, 6), (5, 2), (5, 6), (6, 3), (6, 5)]
    assert _lost_zero(grid, centre)
    assert not grid[1, 2].has_candidate(1)
    assert not grid[2, 1].has_candidate(1)
    assert grid[1, 1].has_candidate(1)
    assert grid[3, 3].has_candidate(0)
    assert grid.n_possibilities_overall() == 2 + 79 * 9 - 10


def test_gen_neighbours_stays_on_board():
    assert sorted(gen_neighbours(0, 0, KNIGHT_OFFSETS)) == [(1, 2), (2, 1)]


def test_conflicts():
    grid = Grid()
    grid[2, 2] = Cell.from_digit(5)
    grid[3, 3] = Cell.from_digit(5)
    assert king_conflicts(grid)
    assert not knight_conflicts(grid)
    assert not grid.has_conflict()

    grid = Grid()
    grid[2, 2] = Cell.from_digit(5)
    grid[4, 3] = Cell.from_digit(5)
    assert knight_conflicts(grid)
    assert not king_conflicts(grid)
