"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.config import DEFAULT_CONFIG
from backend.engine.gameplay.moves import neighbors
from backend.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by random-walking from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (identity order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def scramble(
        board: Board,
        num_shuffles: int,
        rng: random.Random | None = None,
    ) -> Board:
        """Return *board* after *num_shuffles* uniformly random legal moves."""
        rng = rng or random.Random()
        n = board.size
        tiles = list(board.tiles)
        blank_pos = board.blank_index

        for _ in range(num_shuffles):
            target = rng.choice(neighbors(n, blank_pos))
            tiles[blank_pos], tiles[target] = tiles[target], tiles[blank_pos]
            blank_pos = target

        return Board(size=n, tiles=tuple(tiles))

    @staticmethod
    def generate(
        size: int,
        rng: random.Random | None = None,
        num_shuffles: int = DEFAULT_CONFIG.shuffle_moves,
    ) -> Board:
        """Return a random *solvable* board of the given size.

        Pass a seeded ``random.Random`` for reproducible boards.  Sizes
        below 2 raise ``InvalidBoardError``.
        """
        board = GameGenerator.scramble(GameGenerator.solved(size), num_shuffles, rng)
        logger.debug("Generated %d×%d board %s", size, size, list(board.tiles))
        return board
