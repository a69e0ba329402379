"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from npuzzle.models.board import Board
from npuzzle.models.move import UNIT_MOVES, Move

logger = logging.getLogger(__name__)

# Random walk length per grid cell when no explicit step count is given.
SHUFFLES_PER_CELL = 100


class BoardGenerator:
    """Creates solvable puzzles by random walks from the solved state."""

    @staticmethod
    def scramble(
        board: Board, steps: int, rng: random.Random | None = None
    ) -> Board:
        """Return *board* after *steps* random legal moves.

        The walk never immediately undoes its previous move unless it has
        no other choice, so short walks still drift away from the start.
        """
        choice = rng.choice if rng is not None else random.choice
        previous: Move | None = None

        for _ in range(steps):
            moves = [m for m in UNIT_MOVES if board.is_valid_move(m)]
            if previous is not None and len(moves) > 1:
                moves.remove(previous.reverse())
            move = choice(moves)
            board = board.my_move(move)
            previous = move
        return board

    @staticmethod
    def generate(
        size: int, steps: int | None = None, rng: random.Random | None = None
    ) -> Board:
        """Return a random *solvable* board of the given size.

        With a positive step count, boards larger than 1×1 are never
        returned already solved.
        """
        if steps is None:
            steps = size * size * SHUFFLES_PER_CELL
        goal = Board.create_goal(size)
        if size <= 1 or steps <= 0:
            return goal

        logger.debug("Scrambling %d×%d board with %d moves", size, size, steps)
        board = BoardGenerator.scramble(goal, steps, rng)
        if board.is_goal():
            # walks can cycle back (a 2×2 walk always does every 12 steps);
            # one more move from the goal never lands on it
            board = BoardGenerator.scramble(board, 1, rng)
        return board
