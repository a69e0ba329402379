"""Sliding-tile puzzle boards and a best-first solver."""

from npuzzle.engine.solver import SearchLimitReached, Solution, Solver
from npuzzle.models import Board, Direction, InvalidMoveError, Move

__all__ = [
    "Board",
    "Direction",
    "InvalidMoveError",
    "Move",
    "SearchLimitReached",
    "Solution",
    "Solver",
]
