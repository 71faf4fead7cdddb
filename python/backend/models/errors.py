"""Errors raised by the puzzle backend."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error the backend raises on purpose."""


class InvalidBoardError(PuzzleError, ValueError):
    """Board length does not match the grid or is not a permutation."""


class IllegalMoveError(PuzzleError, ValueError):
    """A move does not slide a neighbouring tile into the blank."""
