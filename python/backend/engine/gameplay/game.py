"""Move replay and move-sequence validation."""

from __future__ import annotations

from typing import Iterable

from backend.models.board import Board
from backend.models.move import Move


class GamePlay:
    """Replays moves against a board, one at a time."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    # -- movement -------------------------------------------------------------

    def apply(self, move: Move) -> bool:
        """Apply *move* if it is legal on the current board.

        A legal move slides ``move.piece`` from ``move.from_index`` into
        the blank at ``move.to_index``, and the two indices must be
        grid neighbours.  Returns True if the move was applied.
        """
        if not self.board.is_legal(move):
            return False
        self.board = self.board.apply(move)
        self.moves += 1
        return True

    def replay(self, moves: Iterable[Move]) -> bool:
        """Apply every move in order; stop at the first illegal one."""
        return all(self.apply(m) for m in moves)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()


def validate_move_sequence(
    initial: Board,
    moves: Iterable[Move],
    expected: Board | None = None,
) -> bool:
    """True if *moves* replay legally from *initial*.

    When *expected* is given the final board must also equal it.
    """
    game = GamePlay(initial)
    if not game.replay(moves):
        return False
    return expected is None or game.board == expected
