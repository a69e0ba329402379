"""CLI tests — board loading and the ``npuzzle`` commands."""

from __future__ import annotations

import random
from pathlib import Path

import pytest
from typer.testing import CliRunner

from npuzzle.frontend.cli.app import parse_board
from npuzzle.main import app
from npuzzle.models.board import Board

runner = CliRunner()


# -- parse_board --------------------------------------------------------------


@pytest.mark.parametrize(
    "board",
    [
        Board.create_goal(1),
        Board.create_goal(4),
        Board.create_random(5, random.Random(2)),
        Board([[8, 1, 3], [4, 0, 2], [7, 6, 5]]),
    ],
    ids=lambda b: f"{b.size()}x{b.size()}",
)
def test_parse_to_string_output(board: Board) -> None:
    assert parse_board(board.to_string()) == board


def test_parse_flat_list() -> None:
    assert parse_board("1, 2, 3, 4, 5, 6, 7, 0, 8") == Board(
        [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
    )
    assert parse_board("\n  1 2\n3 0\n\n") == Board.create_goal(2)


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("1 2 3", "do not form a square"),
        ("1 2 3\n4 0", "Row 1 has 2 tiles, expected 3"),
        ("1 2\n3 0 4", "Row 1 has 3 tiles, expected 2"),
        ("1 2 3\n4 5 0", "2 rows of 3 tiles do not form a square"),
        ("1 2\n3 x", "non-integer"),
    ],
)
def test_parse_rejects_bad_input(text: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_board(text)


# -- commands -----------------------------------------------------------------


def test_goal_command() -> None:
    result = runner.invoke(app, ["goal", "3"])
    assert result.exit_code == 0
    assert "1 2 3\n4 5 6\n7 8 0" in result.output


def test_check_command() -> None:
    result = runner.invoke(app, ["check", "-t", "8 1 3 4 0 2 7 6 5"])
    assert result.exit_code == 0
    assert "Manhattan" in result.output
    assert "10" in result.output
    assert "Inversions" in result.output


def test_solve_one_move() -> None:
    result = runner.invoke(app, ["solve", "-t", "1 2 3 4 5 6 7 0 8"])
    assert result.exit_code == 0, result.output
    assert "left" in result.output
    assert "Solved in 1 move!" in result.output


def test_solve_already_solved() -> None:
    result = runner.invoke(app, ["solve", "-t", "1 2 3 4 5 6 7 8 0"])
    assert result.exit_code == 0
    assert "Already solved!" in result.output


def test_solve_unsolvable() -> None:
    result = runner.invoke(app, ["solve", "-t", "1 2 3 4 5 6 8 7 0"])
    assert result.exit_code == 1
    assert "unsolvable" in result.output


def test_solve_from_file(tmp_path: Path) -> None:
    path = tmp_path / "board.txt"
    path.write_text(Board([[1, 2, 3], [4, 5, 6], [0, 7, 8]]).to_string() + "\n")

    result = runner.invoke(app, ["solve", "-f", str(path), "--show-boards"])
    assert result.exit_code == 0, result.output
    assert "Solved in 2 moves!" in result.output


def test_solve_scrambled() -> None:
    result = runner.invoke(
        app, ["solve", "--scramble", "3", "--steps", "20", "--seed", "4"]
    )
    assert result.exit_code == 0, result.output
    assert "Solved in" in result.output


def test_solve_random_seeded() -> None:
    result = runner.invoke(app, ["solve", "--random", "2", "--seed", "0"])
    board = Board.create_random(2, random.Random(0))
    expected = 1 if not board.is_solvable() else 0
    assert result.exit_code == expected, result.output


def test_solve_expansion_limit() -> None:
    args = ["solve", "-t", "1 2 3 4 5 6 0 7 8"]

    result = runner.invoke(app, [*args, "--max-expansions", "1"])
    assert result.exit_code == 1
    assert "Search stopped" in result.output

    result = runner.invoke(app, args, env={"NPUZZLE_MAX_EXPANSIONS": "1"})
    assert result.exit_code == 1


def test_solve_needs_exactly_one_source() -> None:
    assert runner.invoke(app, ["solve"]).exit_code == 2
    assert runner.invoke(app, ["solve", "-t", "0", "--scramble", "3"]).exit_code == 2


def test_solve_bad_tiles() -> None:
    result = runner.invoke(app, ["solve", "-t", "1 2 x 0"])
    assert result.exit_code == 2
    assert "non-integer" in result.output


def test_solve_scrambled_2x2_full_cycle() -> None:
    result = runner.invoke(app, ["solve", "--scramble", "2", "--steps", "12"])
    assert result.exit_code == 0, result.output
    assert "Solved in" in result.output
