"""Move and solution-step value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from backend.models.board import Board, Direction


@dataclass(frozen=True)
class Move:
    """A single tile sliding into the blank.

    ``to_index`` is where the blank was before the move, ``from_index``
    the neighbouring tile's position, ``piece`` the tile value and
    ``step`` the 1-based ordinal within a solution.
    """

    from_index: int
    to_index: int
    piece: int
    step: int

    def direction(self, size: int) -> Direction:
        """Direction the tile travels on a board of width *size*."""
        delta = self.to_index - self.from_index
        if delta == -size:
            return Direction.UP
        if delta == size:
            return Direction.DOWN
        if delta == -1:
            return Direction.LEFT
        if delta == 1:
            return Direction.RIGHT
        raise ValueError(f"Indices {self.from_index} and {self.to_index} are not adjacent.")

    def to_dict(self) -> dict[str, int]:
        return {
            "from": self.from_index,
            "to": self.to_index,
            "piece": self.piece,
            "step": self.step,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Move:
        return cls(
            from_index=int(data["from"]),
            to_index=int(data["to"]),
            piece=int(data["piece"]),
            step=int(data.get("step", 0)),
        )


@dataclass(frozen=True)
class SolutionStep:
    """One frame of a replayable solution.  Step 0 carries no move."""

    board: Board
    move: Move | None
    step: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "board": list(self.board.tiles),
            "move": self.move.to_dict() if self.move is not None else None,
            "step": self.step,
        }
