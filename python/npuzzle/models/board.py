"""Board model for the sliding puzzle.

A ``Board`` is an immutable value: the grid plus metrics derived from it
once, at construction time.  Equality and hashing look at the grid only.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from npuzzle.models.move import Move


class InvalidMoveError(ValueError):
    """Raised when a move would push the blank off the grid."""


@dataclass(frozen=True)
class Board:
    """Represents an n×n sliding puzzle board.

    Tiles are stored as a tuple of row tuples. 0 represents the blank.
    """

    tiles: tuple[tuple[int, ...], ...]

    _inversions: int = field(init=False, repr=False, compare=False)
    _hamming: int = field(init=False, repr=False, compare=False)
    _manhattan: int = field(init=False, repr=False, compare=False)
    _blank: tuple[int, int] = field(init=False, repr=False, compare=False)
    _text: str = field(init=False, repr=False, compare=False)
    _hash: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        tiles = tuple(tuple(row) for row in self.tiles)
        n = len(tiles)

        values: list[int] = []
        hamming = 0
        manhattan = 0
        blank = (0, 0)
        for i, row in enumerate(tiles):
            for j, v in enumerate(row):
                if v == 0:
                    blank = (i, j)
                    continue
                values.append(v)
                gi, gj = divmod(v - 1, n)
                if gi != i or gj != j:
                    hamming += 1
                manhattan += abs(i - gi) + abs(j - gj)

        text = "\n".join(" ".join(str(v) for v in row) for row in tiles)

        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "_inversions", _count_inversions(values))
        object.__setattr__(self, "_hamming", hamming)
        object.__setattr__(self, "_manhattan", manhattan)
        object.__setattr__(self, "_blank", blank)
        object.__setattr__(self, "_text", text)
        object.__setattr__(self, "_hash", hash(text))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def create_goal(cls, size: int) -> Board:
        """Return the solved board: 1..size²-1 row-major, blank bottom-right."""
        flat = list(range(1, size * size)) + [0] if size else []
        return cls.from_flat(size, flat)

    @classmethod
    def create_random(cls, size: int, rng: random.Random | None = None) -> Board:
        """Return a uniformly shuffled board.  It may well be unsolvable."""
        flat = list(range(size * size))
        shuffle = rng.shuffle if rng is not None else random.shuffle
        shuffle(flat)
        return cls.from_flat(size, flat)

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls(tuple(tuple(flat[r * size : (r + 1) * size]) for r in range(size)))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> Board:
        return cls(tuple(tuple(row) for row in rows))

    # -- queries --------------------------------------------------------------

    def size(self) -> int:
        return len(self.tiles)

    def tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def blank(self) -> tuple[int, int]:
        """Row and column of the blank."""
        return self._blank

    def hamming(self) -> int:
        """Number of tiles (blank excluded) away from their goal cell."""
        return self._hamming

    def manhattan(self) -> int:
        """Sum of the grid distances of every tile from its goal cell."""
        return self._manhattan

    def inversions(self) -> int:
        return self._inversions

    def is_goal(self) -> bool:
        return self._hamming == 0

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        n = self.size()
        val = self.tiles[row][col]
        if val == 0:
            return row == n - 1 and col == n - 1
        return divmod(val - 1, n) == (row, col)

    def is_solvable(self) -> bool:
        """Parity test on inversions, blank row (from the top) and size."""
        n = self.size()
        if n == 0:
            return True
        even_inversions = self._inversions % 2 == 0
        blank_row = self._blank[0]
        if even_inversions:
            return blank_row % 2 == 1 or n % 2 == 1
        return n % 2 == 0 and blank_row % 2 == 0

    def is_valid_move(self, move: Move) -> bool:
        """Whether the blank can be displaced by *move* without leaving the grid."""
        row, col = self._blank
        last = self.size() - 1
        if move.is_horizontal():
            return not ((col == 0 and move.dj == -1) or (col == last and move.dj == 1))
        return not ((row == 0 and move.di == -1) or (row == last and move.di == 1))

    # -- transformations ------------------------------------------------------

    def my_move(self, move: Move) -> Board:
        """Return a new board with the blank swapped with its *move* neighbour."""
        if abs(move.di) + abs(move.dj) != 1 or not self.is_valid_move(move):
            raise InvalidMoveError(
                f"Cannot move blank at {self._blank} by ({move.di}, {move.dj}) "
                f"on a {self.size()}×{self.size()} board."
            )
        br, bc = self._blank
        tr, tc = br + move.di, bc + move.dj
        rows = [list(row) for row in self.tiles]
        rows[br][bc], rows[tr][tc] = rows[tr][tc], rows[br][bc]
        return Board.from_rows(rows)

    # -- serialisation / hashing ----------------------------------------------

    def to_string(self) -> str:
        return self._text

    def get_hash(self) -> int:
        return self._hash

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return self._text


# -- inversion counting -------------------------------------------------------


def _count_inversions(values: list[int]) -> int:
    """Count out-of-order pairs in *values* with a merge sort."""
    count, _ = _merge_sort(values)
    return count


def _merge_sort(values: list[int]) -> tuple[int, list[int]]:
    if len(values) <= 1:
        return 0, values

    mid = len(values) // 2
    left_count, left = _merge_sort(values[:mid])
    right_count, right = _merge_sort(values[mid:])

    count = left_count + right_count
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            # every remaining left value is greater than right[j - 1]
            count += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return count, merged
