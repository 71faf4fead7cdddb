"""Parity-based solvability test."""

from __future__ import annotations

from bisect import bisect_left, insort

from backend.models.board import Board


def count_inversions(board: Board) -> int:
    """Number of out-of-order pairs among the non-blank tiles."""
    blank = board.blank
    inv = 0
    seen: list[int] = []
    for v in board.tiles:
        if v == blank:
            continue
        inv += len(seen) - bisect_left(seen, v)
        insort(seen, v)
    return inv


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach the goal state.

    Odd widths: the inversion count must be even.  Even widths: every
    vertical move shifts the inversion count by ``size - 1`` (odd) and
    the blank by one row, so inversions plus the blank's distance from
    the bottom row must be even.
    """
    n = board.size
    inv = count_inversions(board)
    if n % 2 == 1:
        return inv % 2 == 0
    blank_row = board.blank_index // n
    blank_from_bottom = n - 1 - blank_row
    return (inv + blank_from_bottom) % 2 == 0
