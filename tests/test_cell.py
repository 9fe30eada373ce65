"""Unit tests for single cells."""

from collections import Counter

from sudoku_logic.cell import Cell


def test_new_cell_has_every_candidate():
    cell = Cell()
    assert not cell.is_solved
    assert cell.candidates() == list(range(9))


def test_remove_candidate_reports_change_once():
    cell = Cell()
    assert cell.remove_candidate(4)
    assert not cell.remove_candidate(4)
    assert cell.candidates() == [0, 1, 2, 3, 5, 6, 7, 8]


def test_remove_candidate_from_solved_cell_is_noop():
    cell = Cell.from_digit(3)
    assert not cell.remove_candidate(3)
    assert not cell.remove_candidate(5)
    assert cell.value == 3
    assert cell.candidates() == []


def test_candidates_are_ascending():
    cell = Cell.from_candidates([7, 2, 5])
    assert cell.candidates() == [2, 5, 7]
    assert cell.n_candidates() == 3


def test_restrict_to():
    cell = Cell.from_candidates([1, 2, 3])
    assert cell.restrict_to([2, 3, 8])
    assert cell.candidates() == [2, 3]
    assert not cell.restrict_to([2, 3])


def test_empty_candidate_set_is_contradiction():
    cell = Cell.from_candidates([6])
    assert not cell.is_contradiction()
    cell.remove_candidate(6)
    assert cell.is_contradiction()
    assert not Cell.from_digit(6).is_contradiction()


def test_equality_and_hashing_are_structural():
    a = Cell.from_candidates([0, 1])
    b = Cell.from_candidates([1, 0])
    assert a == b
    assert hash(a) == hash(b)
    assert a != Cell.from_candidates([0, 2])
    assert Cell.from_digit(0) != Cell.from_candidates([0])
    counts = Counter([a, b, Cell(), Cell.from_digit(0)])
    assert counts[Cell.from_candidates([0, 1])] == 2


def test_clone_is_independent():
    a = Cell()
    b = a.clone()
    b.remove_candidate(0)
    assert a.has_candidate(0)
    assert not b.has_candidate(0)


def test_str():
    assert str(Cell.from_digit(0)) == "1"
    assert str(Cell()) == "_"
