"""Snapshot of a board reached during search."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Board
from backend.models.move import Move


@dataclass(frozen=True)
class SearchState:
    """Board plus the forward move list that produced it.

    ``cost`` is the path cost *g*, ``heuristic`` the estimate *h*.
    """

    board: Board
    blank_index: int
    cost: int
    heuristic: int
    moves: tuple[Move, ...] = ()

    @property
    def f_score(self) -> int:
        return self.cost + self.heuristic

    @property
    def key(self) -> bytes:
        return self.board.key
