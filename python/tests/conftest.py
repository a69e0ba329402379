"""Shared boards for the test suite."""

from __future__ import annotations

import pytest

from npuzzle.models.board import Board


@pytest.fixture
def goal_3x3() -> Board:
    return Board.create_goal(3)


@pytest.fixture
def one_move_3x3() -> Board:
    """Blank one step left of its goal cell."""
    return Board([[1, 2, 3], [4, 5, 6], [7, 0, 8]])


@pytest.fixture
def unsolvable_3x3() -> Board:
    """Goal with the last two tiles swapped."""
    return Board([[1, 2, 3], [4, 5, 6], [8, 7, 0]])
