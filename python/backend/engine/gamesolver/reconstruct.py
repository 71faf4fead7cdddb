"""Turns a forward move list into a replayable solution trace."""

from __future__ import annotations

from typing import Sequence

from backend.models.board import Board
from backend.models.move import Move, SolutionStep


def reconstruct(initial: Board, moves: Sequence[Move]) -> list[SolutionStep]:
    """Return ``[step 0, step 1, ...]`` starting at *initial*.

    Each step's board is the previous board with that step's move
    applied; ``Board.apply`` raises ``IllegalMoveError`` if the list
    does not replay.
    """
    steps = [SolutionStep(board=initial, move=None, step=0)]
    board = initial
    for i, move in enumerate(moves, 1):
        board = board.apply(move)
        steps.append(SolutionStep(board=board, move=move, step=i))
    return steps
