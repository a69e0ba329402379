"""Sliding puzzle solver.

Usage::

    npuzzle goal 4                           # print the 4×4 goal board
    npuzzle check -t "1 2 3 4 5 6 8 7 0"     # metrics and solvability
    npuzzle solve -t "1 2 3 4 5 6 7 0 8"     # solve an explicit board
    npuzzle solve --scramble 3 --seed 7      # solve a scrambled 3×3
    npuzzle --verbose solve -f board.txt     # debug logging
"""

import logging
import random
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from npuzzle.engine.generator import BoardGenerator
from npuzzle.engine.solver import SearchLimitReached, Solver
from npuzzle.frontend.cli.app import (
    console,
    err_console,
    parse_board,
    render_metrics,
    show_board,
    show_solution,
)
from npuzzle.models.board import Board

app = typer.Typer(add_completion=False, help="Sliding puzzle solver.")


# -- helpers ------------------------------------------------------------------


def _fail(message: str, code: int) -> typer.Exit:
    err_console.print(f"[red]{message}[/red]")
    return typer.Exit(code=code)


def _load_board(
    tiles: Optional[str],
    file: Optional[Path],
    random_size: Optional[int] = None,
    scramble: Optional[int] = None,
    steps: Optional[int] = None,
    seed: Optional[int] = None,
) -> Board:
    sources = [s for s in (tiles, file, random_size, scramble) if s is not None]
    if len(sources) != 1:
        raise typer.BadParameter(
            "Give exactly one of --tiles, --file, --random or --scramble."
        )

    rng = random.Random(seed) if seed is not None else None
    if random_size is not None:
        return Board.create_random(random_size, rng)
    if scramble is not None:
        return BoardGenerator.generate(scramble, steps, rng)

    text = tiles if tiles is not None else file.read_text()
    try:
        return parse_board(text)
    except ValueError as exc:
        raise _fail(str(exc), code=2) from None


# -- CLI entry point ----------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Sliding puzzle solver."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.command()
def goal(
    size: int = typer.Argument(..., min=0, help="Side length."),
) -> None:
    """Print the solved board of the given size."""
    console.print(Board.create_goal(size).to_string())


@app.command()
def check(
    tiles: Optional[str] = typer.Option(
        None, "-t", "--tiles",
        help="Row-major tiles, 0 for the blank.",
    ),
    file: Optional[Path] = typer.Option(
        None, "-f", "--file",
        exists=True, dir_okay=False,
        help="File holding one board row per line.",
    ),
) -> None:
    """Show a board's distances and whether it can be solved."""
    board = _load_board(tiles, file)
    show_board(board, "Board")
    console.print(render_metrics(board))


@app.command()
def solve(
    tiles: Optional[str] = typer.Option(
        None, "-t", "--tiles",
        help="Row-major tiles, 0 for the blank.",
    ),
    file: Optional[Path] = typer.Option(
        None, "-f", "--file",
        exists=True, dir_okay=False,
        help="File holding one board row per line.",
    ),
    random_size: Optional[int] = typer.Option(
        None, "-r", "--random",
        min=0,
        help="Solve a shuffled board of this size (may be unsolvable).",
    ),
    scramble: Optional[int] = typer.Option(
        None, "-s", "--scramble",
        min=0,
        help="Solve a solvable board of this size made by random moves.",
    ),
    steps: Optional[int] = typer.Option(
        None, "--steps",
        min=0,
        help="Random moves used by --scramble.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random / --scramble.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=0,
        envvar="NPUZZLE_MAX_EXPANSIONS",
        help="Give up after expanding this many boards.",
    ),
    show_boards: bool = typer.Option(
        False, "--show-boards/--no-show-boards",
        help="Print every board along the solution.",
    ),
) -> None:
    """Solve a board and list the tile moves."""
    board = _load_board(tiles, file, random_size, scramble, steps, seed)
    show_board(board, "Initial")

    try:
        solution = Solver.solve(board, max_expansions=max_expansions)
    except SearchLimitReached as exc:
        raise _fail(str(exc), code=1) from None

    if not solution:
        raise _fail("Board is unsolvable.", code=1)

    show_solution(solution, show_boards=show_boards)


if __name__ == "__main__":
    app()
