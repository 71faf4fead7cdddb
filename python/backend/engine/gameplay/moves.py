"""Legal-move enumeration."""

from __future__ import annotations

from backend.engine.gamestate import SearchState
from backend.models.board import Board
from backend.models.move import Move

# Neighbour offsets of the blank: up, down, left, right.
_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def neighbors(size: int, index: int) -> list[int]:
    """Grid-adjacent indices of *index*, in up/down/left/right order."""
    assert 0 <= index < size * size, f"index {index} outside a {size}×{size} grid"
    r, c = divmod(index, size)
    out: list[int] = []
    for dr, dc in _OFFSETS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < size and 0 <= nc < size:
            out.append(nr * size + nc)
    return out


def board_moves(board: Board, blank_index: int, step: int = 1) -> list[Move]:
    """Moves that slide a neighbour of the blank into it, numbered *step*."""
    adjacent = neighbors(board.size, blank_index)
    assert board.tiles[blank_index] == board.blank, (
        f"blank is not at index {blank_index}"
    )
    return [
        Move(from_index=i, to_index=blank_index, piece=board.tiles[i], step=step)
        for i in adjacent
    ]


def legal_moves(state: SearchState) -> list[Move]:
    """Between two and four successor moves of *state*."""
    return board_moves(state.board, state.blank_index, step=state.cost + 1)
