"""Rich terminal frontend: boards and solution traces as styled panels."""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.models.board import Board
from backend.models.move import SolutionStep

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, moved: int | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid.

    Tiles are printed 1-based so the blank (the highest value) shows as
    a dot and the numbers read like a physical puzzle.  *moved* is the
    index of the tile that just slid and is highlighted.
    """
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            idx = board.index(r, c)
            if val == board.blank:
                cells.append("[dim]·[/dim]")
            elif idx == moved:
                cells.append(f"[bold cyan]{val + 1:>{width}}[/bold cyan]")
            elif board.is_tile_correct(idx):
                cells.append(f"[bold green]{val + 1:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val + 1:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _step_panel(step: SolutionStep, total: int) -> Panel:
    size = step.board.size
    if step.move is None:
        caption = Text("  Start", style="bold yellow")
        moved = None
    else:
        move = step.move
        caption = Text()
        caption.append(f"  Move {step.step}/{total} ", style="bold cyan")
        caption.append(
            f"tile {move.piece + 1} {move.direction(size).value} "
            f"({move.from_index} → {move.to_index})",
            style="dim",
        )
        moved = move.to_index

    return Panel(
        Group(Align.center(render_board(step.board, moved)), Align.center(caption)),
        title=f"[bold cyan]Step {step.step}[/bold cyan]",
        border_style="green" if step.board.is_solved() else "bright_blue",
        padding=(0, 2),
    )


# -- public entry points ------------------------------------------------------


def show_board(board: Board, title: str = "") -> None:
    size = board.size
    panel = Panel(
        Align.center(render_board(board)),
        title=title or f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(Align.center(panel))


def show_solution(steps: list[SolutionStep]) -> None:
    """Print every step of a solution trace, start to goal."""
    total = len(steps) - 1
    for step in steps:
        console.print(Align.center(_step_panel(step, total)))
    console.print(
        Align.center(Text(f"\n  Solved in {total} moves!\n", style="bold green"))
    )


def show_message(markup: str) -> None:
    console.print(Align.center(Text.from_markup(f"  {markup}")))
