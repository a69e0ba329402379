"""Rich terminal frontend — board tables, metrics and solution listings.

Everything here only consumes the public ``Board`` / ``Solver`` API; the
command definitions live in ``npuzzle.main``.
"""

from __future__ import annotations

import math
import re

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.solver import Solution
from npuzzle.models.board import Board

console = Console()
err_console = Console(stderr=True)

_SEPARATORS = re.compile(r"[,\s]+")


# -- loading ------------------------------------------------------------------


def parse_board(text: str) -> Board:
    """Build a board from its ``to_string`` form or a flat row-major list.

    A single line of n² numbers (spaces or commas) is read row-major;
    several lines are read as rows and must form a square.
    """
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    try:
        rows = [[int(tok) for tok in _SEPARATORS.split(line) if tok] for line in lines]
    except ValueError as exc:
        raise ValueError(f"Board contains a non-integer tile: {exc}") from None

    if len(rows) == 1:
        flat = rows[0]
        size = math.isqrt(len(flat))
        if size * size != len(flat):
            raise ValueError(
                f"{len(flat)} tiles do not form a square board."
            )
        return Board.from_flat(size, flat)

    width = len(rows[0]) if rows else 0
    for r, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(
                f"Row {r} has {len(row)} tiles, expected {width}."
            )
    if len(rows) != width:
        raise ValueError(
            f"{len(rows)} rows of {width} tiles do not form a square board."
        )
    return Board.from_rows(rows)


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid.

    Reads the side from ``board.size()`` and the immutable row tuples in
    ``board.tiles``; misplaced tiles are drawn white, placed ones green.
    """
    size = board.size()
    width = len(str(max(size * size - 1, 0)))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def render_metrics(board: Board) -> Table:
    table = Table(show_header=False, box=rich.box.SIMPLE)
    table.add_column(style="cyan")
    table.add_column(justify="right")

    solvable = "[green]yes[/green]" if board.is_solvable() else "[red]no[/red]"
    row, col = board.blank()
    table.add_row("Size", f"{board.size()}×{board.size()}")
    table.add_row("Solvable", solvable)
    table.add_row("Solved", "yes" if board.is_goal() else "no")
    table.add_row("Hamming", str(board.hamming()))
    table.add_row("Manhattan", str(board.manhattan()))
    table.add_row("Inversions", str(board.inversions()))
    table.add_row("Blank", f"row {row}, col {col}")
    return table


def show_board(board: Board, title: str) -> None:
    size = board.size()
    panel = Panel(
        Align.center(render_board(board)),
        title=f"[bold cyan]{title}  {size}×{size}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print(panel)


# -- solution rendering -------------------------------------------------------


def show_solution(solution: Solution, show_boards: bool = False) -> None:
    """Print the move list of a non-empty *solution*."""
    n = solution.moves()
    if n == 0:
        console.print("[green]Already solved![/green]")
        return

    boards = list(solution)
    for i, move in enumerate(solution.steps(), 1):
        line = Text()
        line.append(f"  {i:>4}. ", style="dim")
        line.append(move.direction.value, style="bold cyan")
        console.print(line)
        if show_boards:
            console.print(render_board(boards[i]))

    plural = "move" if n == 1 else "moves"
    console.print(f"[bold green]Solved in {n} {plural}![/bold green]")
