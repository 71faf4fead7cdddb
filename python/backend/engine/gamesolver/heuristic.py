"""Manhattan-distance heuristic."""

from __future__ import annotations

from backend.models.board import Board


def manhattan_distance(board: Board) -> int:
    """Sum of each non-blank tile's grid distance to its goal cell.

    One move changes exactly one tile's distance by one, so the sum is
    admissible and consistent.
    """
    n = board.size
    blank = board.blank
    total = 0
    for i, v in enumerate(board.tiles):
        if v == blank:
            continue
        r, c = divmod(i, n)
        gr, gc = divmod(v, n)
        total += abs(r - gr) + abs(c - gc)
    return total
