#!/usr/bin/env python3
"""Sliding-tile puzzle solver.

Usage::

    python main.py solve 0 1 2 3 4 5 6 8 7     # 3×3, size inferred
    python main.py solve -s 4 ...              # explicit size
    python main.py generate -s 3 --seed 7      # random solvable board
    python main.py check 1 0 2 3 4 5 6 7 8     # solvability only

Tiles are 0-based and the highest value is the blank.
"""

import logging
import math
import random
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.logging import RichHandler
from rich.markup import escape

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import DEFAULT_CONFIG, SolverConfig  # noqa: E402
from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamesolver import SearchOutcome, Solver  # noqa: E402
from backend.models.board import Board  # noqa: E402
from backend.models.errors import PuzzleError  # noqa: E402
from frontend.cli.rich.app import (  # noqa: E402
    show_board,
    show_message,
    show_solution,
)


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _infer_size(tiles: List[int], size: Optional[int]) -> int:
    if size is not None:
        return size
    n = math.isqrt(len(tiles))
    if n * n != len(tiles):
        raise PuzzleError(
            f"{len(tiles)} tiles do not form a square grid; pass --size."
        )
    return n


def _load_board(tiles: List[int], size: Optional[int]) -> Board:
    try:
        return Board.from_flat(_infer_size(tiles, size), tiles)
    except PuzzleError as exc:
        show_message(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding-tile puzzle solver.")


@app.command()
def solve(
    tiles: List[int] = typer.Argument(..., help="Board tiles, row-major."),
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        min=2,
        help="Grid size. Inferred from the tile count when omitted.",
    ),
    max_cost: int = typer.Option(
        DEFAULT_CONFIG.max_cost, "--max-cost",
        min=0,
        help="Give up once the search passes this many moves.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search diagnostics.",
    ),
) -> None:
    """Print an optimal move sequence for a board."""
    _configure_logging(verbose)
    board = _load_board(tiles, size)
    result = Solver.search(board, SolverConfig(max_cost=max_cost))

    if not result.found:
        if result.outcome is SearchOutcome.UNSOLVABLE:
            show_message("[red]Board is unsolvable.[/red]")
        else:
            show_message(
                f"[yellow]No solution found ({result.outcome.value} after "
                f"{result.expanded} states).[/yellow]"
            )
        raise typer.Exit(code=1)

    show_solution(result.steps())


@app.command()
def generate(
    size: int = typer.Option(
        3, "-s", "--size",
        min=2,
        help="Grid size.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible board.",
    ),
    shuffles: int = typer.Option(
        DEFAULT_CONFIG.shuffle_moves, "--shuffles",
        min=0,
        help="Random moves applied to the solved board.",
    ),
) -> None:
    """Print a random solvable board."""
    board = GameGenerator.generate(size, random.Random(seed), num_shuffles=shuffles)
    typer.echo(" ".join(str(v) for v in board.tiles))
    show_board(board)


@app.command()
def check(
    tiles: List[int] = typer.Argument(..., help="Board tiles, row-major."),
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        min=2,
        help="Grid size. Inferred from the tile count when omitted.",
    ),
) -> None:
    """Report whether a board can be solved."""
    board = _load_board(tiles, size)
    if Solver.is_solvable(board):
        show_message("[green]Solvable.[/green]")
        return
    show_message("[red]Unsolvable.[/red]")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
