"""Move generator, replay and move-sequence validation."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import (
    GamePlay,
    legal_moves,
    neighbors,
    validate_move_sequence,
)
from backend.engine.gamesolver import reconstruct
from backend.engine.gamestate import SearchState
from backend.models.board import Board
from backend.models.errors import IllegalMoveError
from backend.models.move import Move

_ONE_AWAY = Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 8, 7])


def _state(board: Board, cost: int = 0) -> SearchState:
    return SearchState(board=board, blank_index=board.blank_index, cost=cost, heuristic=0)


# -- move generator -----------------------------------------------------------


@pytest.mark.parametrize(
    "index, expected",
    [(0, [3, 1]), (1, [4, 0, 2]), (4, [1, 7, 3, 5]), (8, [5, 7])],
    ids=["corner", "edge", "centre", "goal-corner"],
)
def test_neighbors(index: int, expected: list[int]) -> None:
    assert neighbors(3, index) == expected


def test_legal_moves_target_the_blank() -> None:
    moves = legal_moves(_state(_ONE_AWAY, cost=4))
    assert [m.from_index for m in moves] == [4, 6, 8]
    for move in moves:
        assert move.to_index == 7
        assert move.piece == _ONE_AWAY.tiles[move.from_index]
        assert move.step == 5
        assert _ONE_AWAY.is_legal(move)


def test_legal_moves_count_bounds() -> None:
    for size in (2, 3, 4):
        for blank in range(size * size):
            tiles = list(range(size * size))
            tiles[blank], tiles[-1] = tiles[-1], tiles[blank]
            count = len(legal_moves(_state(Board(size=size, tiles=tuple(tiles)))))
            assert 2 <= count <= 4


def test_blank_index_out_of_range_fails_loudly() -> None:
    state = SearchState(board=Board.solved(3), blank_index=9, cost=0, heuristic=0)
    with pytest.raises(AssertionError):
        legal_moves(state)


# -- replay -------------------------------------------------------------------


def test_game_applies_legal_and_refuses_illegal() -> None:
    game = GamePlay(_ONE_AWAY)
    assert not game.apply(Move(from_index=5, to_index=7, piece=5, step=1))
    assert game.moves == 0
    assert game.apply(Move(from_index=8, to_index=7, piece=7, step=1))
    assert game.is_won
    assert game.moves == 1


def test_validate_move_sequence() -> None:
    good = [Move(from_index=8, to_index=7, piece=7, step=1)]
    assert validate_move_sequence(_ONE_AWAY, good)
    assert validate_move_sequence(_ONE_AWAY, good, expected=Board.solved(3))
    assert not validate_move_sequence(_ONE_AWAY, good, expected=_ONE_AWAY)
    assert validate_move_sequence(_ONE_AWAY, [])


def test_validate_rejects_wrong_piece_midway() -> None:
    moves = [
        Move(from_index=4, to_index=7, piece=4, step=1),
        Move(from_index=7, to_index=4, piece=7, step=2),  # tile 4 is there now
    ]
    assert not validate_move_sequence(_ONE_AWAY, moves)


# -- reconstruction -----------------------------------------------------------


def test_reconstruct_starts_with_initial_board() -> None:
    moves = [
        Move(from_index=4, to_index=7, piece=4, step=1),
        Move(from_index=7, to_index=4, piece=4, step=2),
        Move(from_index=8, to_index=7, piece=7, step=3),
    ]
    steps = reconstruct(_ONE_AWAY, moves)
    assert [s.step for s in steps] == [0, 1, 2, 3]
    assert steps[0].board == _ONE_AWAY
    assert steps[0].move is None
    assert steps[2].board == _ONE_AWAY
    assert steps[-1].board.is_solved()


def test_reconstruct_raises_on_bad_move_list() -> None:
    with pytest.raises(IllegalMoveError):
        reconstruct(_ONE_AWAY, [Move(from_index=0, to_index=7, piece=0, step=1)])
