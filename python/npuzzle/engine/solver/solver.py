"""Sliding puzzle solver: best-first search over board values."""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass

from npuzzle.models.board import Board
from npuzzle.models.move import UNIT_MOVES, Move

logger = logging.getLogger(__name__)


class SearchLimitReached(RuntimeError):
    """The search expanded more boards than the caller allowed."""

    def __init__(self, expansions: int) -> None:
        super().__init__(f"Search stopped after expanding {expansions} boards.")
        self.expansions = expansions


@dataclass(frozen=True)
class Solution:
    """Boards from the initial one to the goal, both ends included.

    Empty when the initial board is unsolvable; a single board when it was
    already solved.  Check ``len()`` (or truthiness) to tell those apart,
    ``moves()`` is 0 in both cases.
    """

    boards: tuple[Board, ...] = ()

    def moves(self) -> int:
        return max(0, len(self.boards) - 1)

    @property
    def initial(self) -> Board | None:
        return self.boards[0] if self.boards else None

    @property
    def goal(self) -> Board | None:
        return self.boards[-1] if self.boards else None

    def steps(self) -> Iterator[Move]:
        """Yield the blank displacement between each consecutive pair."""
        for before, after in itertools.pairwise(self.boards):
            (r0, c0), (r1, c1) = before.blank(), after.blank()
            yield Move(r1 - r0, c1 - c0)

    def __iter__(self) -> Iterator[Board]:
        return iter(self.boards)

    def __len__(self) -> int:
        return len(self.boards)

    def __getitem__(self, index: int) -> Board:
        return self.boards[index]


@dataclass(frozen=True)
class _State:
    board: Board
    priority: int
    depth: int


def priority(board: Board, depth: int) -> int:
    """Search priority of *board* reached after *depth* moves (lower first).

    The weights depend on the board size and are not admissible, so the
    path found is a solution but not necessarily a shortest one.
    """
    size = board.size()
    m = board.manhattan()
    h = board.hamming()
    if size <= 3:
        value = math.atan(m) * m + depth
    elif size == 4:
        value = 2.25 * m + h + depth
    elif size == 5:
        weight = 3.34 if m % 3 == 1 else 2.5 + math.atan(m)
        value = weight * m + h
    else:
        value = (size // 2 + math.atan(m + depth)) * m + h + depth
    return int(value)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(initial: Board, max_expansions: int | None = None) -> Solution:
        """Return a path of boards that solves *initial*.

        The search is unbounded unless *max_expansions* is given, in which
        case ``SearchLimitReached`` is raised once that many boards have been
        expanded without reaching the goal.
        """
        if not initial.is_solvable():
            logger.debug("Board is unsolvable:\n%s", initial)
            return Solution()

        if initial.size() <= 1 or initial.is_goal():
            return Solution((initial,))

        counter = itertools.count()
        heap: list[tuple[int, int, _State]] = []
        start = _State(initial, priority(initial, 0), 0)
        heapq.heappush(heap, (start.priority, next(counter), start))

        # board -> move that first reached it; the initial board has no entry.
        predecessors: dict[Board, Move] = {}
        expansions = 0

        logger.debug(
            "Solving %d×%d board (manhattan=%d, hamming=%d)",
            initial.size(), initial.size(), initial.manhattan(), initial.hamming(),
        )

        while heap:
            _, _, state = heapq.heappop(heap)
            board = state.board

            if board.is_goal():
                path = Solver._reconstruct(initial, board, predecessors)
                logger.debug(
                    "Found %d-move solution after %d expansions (%d boards seen)",
                    len(path) - 1, expansions, len(predecessors) + 1,
                )
                return Solution(tuple(path))

            if max_expansions is not None and expansions >= max_expansions:
                raise SearchLimitReached(expansions)
            expansions += 1

            depth = state.depth + 1
            for move in UNIT_MOVES:
                if not board.is_valid_move(move):
                    continue
                neighbor = board.my_move(move)
                if neighbor == initial or neighbor in predecessors:
                    continue
                predecessors[neighbor] = move
                child = _State(neighbor, priority(neighbor, depth), depth)
                heapq.heappush(heap, (child.priority, next(counter), child))

        logger.debug("Search space exhausted after %d expansions", expansions)
        return Solution()

    @staticmethod
    def hint(board: Board) -> Move | None:
        """Return the first move of a solution, or ``None`` if solved / unsolvable."""
        if board.is_goal():
            return None
        solution = Solver.solve(board)
        return next(solution.steps(), None)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _reconstruct(
        initial: Board, goal: Board, predecessors: dict[Board, Move]
    ) -> list[Board]:
        path = [goal]
        current = goal
        while current != initial:
            current = current.my_move(predecessors[current].reverse())
            path.append(current)
        path.reverse()
        return path
