"""Solvability checker, cross-checked against exhaustive search."""

from __future__ import annotations

import itertools
import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import count_inversions, is_solvable
from backend.models.board import Board


def _swap_two_tiles(board: Board) -> Board:
    """Transpose the first two non-blank tiles (flips solvability)."""
    tiles = list(board.tiles)
    a, b = [i for i, v in enumerate(tiles) if v != board.blank][:2]
    tiles[a], tiles[b] = tiles[b], tiles[a]
    return Board(size=board.size, tiles=tuple(tiles))


# -- inversions ---------------------------------------------------------------


def test_inversions_ignore_blank() -> None:
    assert count_inversions(Board.solved(3)) == 0
    assert count_inversions(Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 8, 7])) == 0
    assert count_inversions(Board.from_flat(3, [1, 0, 2, 3, 4, 5, 6, 7, 8])) == 1
    assert count_inversions(Board.from_flat(3, [7, 6, 5, 4, 3, 2, 1, 0, 8])) == 28


def test_single_transposition_is_unsolvable() -> None:
    board = Board.from_flat(3, [1, 0, 2, 3, 4, 5, 6, 7, 8])
    assert not is_solvable(board)


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_solved_board_is_solvable(size: int) -> None:
    assert is_solvable(Board.solved(size))


# -- ground truth -------------------------------------------------------------


def test_matches_exhaustive_search_2x2(distances_2x2: dict) -> None:
    for perm in itertools.permutations(range(4)):
        board = Board(size=2, tiles=perm)
        assert is_solvable(board) == (perm in distances_2x2), perm


def test_matches_exhaustive_search_3x3(distances_3x3: dict) -> None:
    assert len(distances_3x3) == 181440
    rng = random.Random(3)
    for _ in range(2000):
        perm = list(range(9))
        rng.shuffle(perm)
        board = Board(size=3, tiles=tuple(perm))
        assert is_solvable(board) == (board.tiles in distances_3x3), perm


# -- random walks -------------------------------------------------------------


@pytest.mark.parametrize("size", [3, 4])
@pytest.mark.parametrize("steps", [0, 1, 2, 7, 50, 501, 2000, 10000])
def test_random_walk_stays_solvable(size: int, steps: int) -> None:
    rng = random.Random(steps * 31 + size)
    board = GameGenerator.scramble(Board.solved(size), steps, rng)
    assert is_solvable(board)


@pytest.mark.parametrize("size", [3, 4])
def test_random_walk_plus_transposition_is_unsolvable(size: int) -> None:
    rng = random.Random(size)
    for steps in range(0, 400, 13):
        board = GameGenerator.scramble(Board.solved(size), steps, rng)
        assert not is_solvable(_swap_two_tiles(board))


def test_even_grid_measures_blank_row_from_bottom() -> None:
    # Blank moved up one row on a 4×4: three inversions, one row from bottom.
    board = Board.from_flat(4, [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 15, 12, 13, 14, 11])
    assert count_inversions(board) == 3
    assert is_solvable(board)
