"""Request-level entry points for callers that hand over raw tile lists.

These wrap the engine for a request handler: inputs arrive as plain
lists, failures come back as data instead of exceptions.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence

from backend.config import DEFAULT_CONFIG, SolverConfig
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import validate_move_sequence as _validate
from backend.engine.gamesolver import Solver, is_solvable
from backend.models.board import Board
from backend.models.errors import InvalidBoardError
from backend.models.move import Move, SolutionStep

logger = logging.getLogger(__name__)


@dataclass
class SolveRequest:
    initial_board: Sequence[int]
    grid_size: int


@dataclass
class SolveResponse:
    success: bool
    solution: list[SolutionStep] = field(default_factory=list)
    total_steps: int = 0
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "solution": [s.to_dict() for s in self.solution],
            "totalSteps": self.total_steps,
            "error": self.error,
        }


def _failure(message: str) -> SolveResponse:
    return SolveResponse(success=False, error=message)


def solve_puzzle(
    request: SolveRequest, config: SolverConfig = DEFAULT_CONFIG
) -> SolveResponse:
    """Validate *request*, run the solver and package the outcome."""
    if request.grid_size not in config.supported_sizes:
        return _failure(
            f"Unsupported grid size {request.grid_size}; "
            f"expected one of {list(config.supported_sizes)}."
        )
    try:
        board = Board.from_flat(request.grid_size, request.initial_board)
    except InvalidBoardError as exc:
        return _failure(str(exc))

    result = Solver.search(board, config)
    if not result.found:
        logger.info("No solution for %s (%s)", list(board.tiles), result.outcome)
        return _failure("No solution found.")

    steps = result.steps()
    return SolveResponse(success=True, solution=steps, total_steps=len(steps) - 1)


def is_puzzle_solvable(board: Sequence[int], grid_size: int) -> bool:
    try:
        return is_solvable(Board.from_flat(grid_size, board))
    except InvalidBoardError:
        return False


def generate_random_puzzle(
    grid_size: int,
    seed: int | None = None,
    config: SolverConfig = DEFAULT_CONFIG,
) -> list[int]:
    """Random solvable board as a flat list.

    Raises ``InvalidBoardError`` for sizes outside ``config.supported_sizes``.
    """
    if grid_size not in config.supported_sizes:
        raise InvalidBoardError(
            f"Unsupported grid size {grid_size}; "
            f"expected one of {list(config.supported_sizes)}."
        )
    board = GameGenerator.generate(
        grid_size, random.Random(seed), num_shuffles=config.shuffle_moves
    )
    return list(board.tiles)


def validate_move_sequence(
    initial_board: Sequence[int],
    moves: Iterable[Move | Mapping[str, Any]],
    grid_size: int,
    expected: Sequence[int] | None = None,
) -> bool:
    """True if *moves* replay legally from *initial_board*.

    Moves may be :class:`Move` objects or ``{from, to, piece, step}``
    mappings.  When *expected* is given the final board must match it.
    """
    try:
        board = Board.from_flat(grid_size, initial_board)
        target = Board.from_flat(grid_size, expected) if expected is not None else None
        parsed = [m if isinstance(m, Move) else Move.from_dict(m) for m in moves]
    except (InvalidBoardError, KeyError, TypeError, ValueError):
        return False
    return _validate(board, parsed, target)
