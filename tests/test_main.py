"""Tests for the command-line driver."""

import io
import logging
import sys

import pytest

from sudoku_logic import main as main_module
from sudoku_logic.main import (
    DEMO_SUDOKU_1,
    clean_puzzle_text,
    main,
    make_solver,
    read_puzzle,
)
from sudoku_logic.chess import kings, knights
from sudoku_logic.strategies import ADVANCED_STRATEGIES, DEFAULT_STRATEGIES

from conftest import WIKIPEDIA_PUZZLE, WIKIPEDIA_SOLUTION


@pytest.fixture(autouse=True)
def quiet_root_logger(monkeypatch):
    """
    Leave the root logger to pytest.
    """
    levels = []
    monkeypatch.setattr(main_module, "main_only_quicksetup_rootlogger",
                        lambda level: levels.append(level))
    return levels


def test_clean_puzzle_text():
    assert clean_puzzle_text("# comment\n12 3\n\n 4.5 \n") == "1234.5"
    assert len(clean_puzzle_text(DEMO_SUDOKU_1)) == 81


def test_read_puzzle_warns_if_ill_formed(caplog):
    grid = read_puzzle("1.2")
    assert grid.n_unknown_cells() == 79
    assert "Not a well-formed Sudoku" in caplog.text


def test_make_solver():
    solver = make_solver()
    assert solver.strategies == DEFAULT_STRATEGIES
    assert len(solver.checks) == 1
    solver = make_solver(advanced=True, with_kings=True, with_knights=True,
                         max_depth=3)
    assert solver.strategies == (
        DEFAULT_STRATEGIES + ADVANCED_STRATEGIES + [kings, knights])
    assert len(solver.checks) == 3
    assert solver.max_depth == 3


def _run(argv) -> int:
    with pytest.raises(SystemExit) as e:
        main(argv)
    return e.value.code


def test_working_from_file(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    filename = tmp_path / "puzzle.txt"
    filename.write_text("# Wikipedia\n" + "\n".join(
        WIKIPEDIA_PUZZLE[i:i + 9] for i in range(0, 81, 9)))
    assert _run(["working", str(filename)]) == 0
    assert " 5  3  4 | 6  7  8 | 9  1  2 " in caplog.text


def test_working_from_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(WIKIPEDIA_PUZZLE))
    assert _run(["working", "--advanced"]) == 0


def test_working_without_guessing_fails(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(WIKIPEDIA_SOLUTION[:27]))
    assert _run(["working", "-", "--noguess"]) == 1


def test_working_contradictory(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("11"))
    assert _run(["working"]) == 1


def test_no_command():
    assert _run([]) == 1


def test_verbose(quiet_root_logger, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(WIKIPEDIA_PUZZLE))
    assert _run(["--verbose", "working"]) == 0
    assert quiet_root_logger == [logging.DEBUG]


def test_solve_by_integer_programming(tmp_path):
    pytest.importorskip("mip")
    filename = tmp_path / "puzzle.txt"
    filename.write_text(WIKIPEDIA_PUZZLE)
    assert _run(["solve", str(filename)]) == 0
