from npuzzle.models.board import Board, InvalidMoveError
from npuzzle.models.move import UNIT_MOVES, Direction, Move

__all__ = ["Board", "Direction", "InvalidMoveError", "Move", "UNIT_MOVES"]
