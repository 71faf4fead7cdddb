from backend.models.board import Board, Direction
from backend.models.errors import IllegalMoveError, InvalidBoardError, PuzzleError
from backend.models.move import Move, SolutionStep

__all__ = [
    "Board",
    "Direction",
    "IllegalMoveError",
    "InvalidBoardError",
    "Move",
    "PuzzleError",
    "SolutionStep",
]
