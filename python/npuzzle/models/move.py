"""Move model: a unit displacement of the blank."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """Direction in which the *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Move:
    """Offset ``(di, dj)`` from the blank to the tile swapped into it."""

    di: int
    dj: int

    @classmethod
    def from_direction(cls, direction: Direction) -> Move:
        return _DIRECTION_TO_MOVE[direction]

    def is_vertical(self) -> bool:
        return self.dj == 0

    def is_horizontal(self) -> bool:
        return self.di == 0

    def reverse(self) -> Move:
        return Move(-self.di, -self.dj)

    @property
    def direction(self) -> Direction:
        """Where the swapped tile travels.

        The tile sits at the blank's offset and slides the opposite way,
        e.g. ``Move(1, 0)`` pulls the tile below the blank ``UP``.
        """
        try:
            return _MOVE_TO_DIRECTION[self]
        except KeyError:
            raise ValueError(f"{self} is not a unit move") from None


# Blank goes up, left, right, down.
UNIT_MOVES: tuple[Move, ...] = (
    Move(-1, 0),
    Move(0, -1),
    Move(0, 1),
    Move(1, 0),
)

_DIRECTION_TO_MOVE: dict[Direction, Move] = {
    Direction.UP: Move(1, 0),
    Direction.DOWN: Move(-1, 0),
    Direction.LEFT: Move(0, 1),
    Direction.RIGHT: Move(0, -1),
}
_MOVE_TO_DIRECTION: dict[Move, Direction] = {
    m: d for d, m in _DIRECTION_TO_MOVE.items()
}
