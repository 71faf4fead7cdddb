"""Sliding puzzle solver: A* over board states."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from enum import StrEnum

from backend.config import DEFAULT_CONFIG, SolverConfig
from backend.engine.gameplay.moves import legal_moves
from backend.engine.gamesolver.heuristic import manhattan_distance
from backend.engine.gamesolver.reconstruct import reconstruct
from backend.engine.gamesolver.solvability import is_solvable
from backend.engine.gamestate import SearchState
from backend.models.board import Board
from backend.models.move import Move, SolutionStep

logger = logging.getLogger(__name__)


class SearchOutcome(StrEnum):
    FOUND = "found"
    EXHAUSTED = "exhausted"
    ABORTED = "aborted"
    UNSOLVABLE = "unsolvable"


@dataclass(frozen=True)
class SearchResult:
    """Terminal state of one search, kept for diagnostics."""

    outcome: SearchOutcome
    initial: Board
    moves: tuple[Move, ...] = ()
    expanded: int = 0

    @property
    def found(self) -> bool:
        return self.outcome is SearchOutcome.FOUND

    def steps(self) -> list[SolutionStep]:
        if not self.found:
            return []
        return reconstruct(self.initial, self.moves)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def search(board: Board, config: SolverConfig = DEFAULT_CONFIG) -> SearchResult:
        """Run A* from *board* and report how the search ended.

        The frontier is popped in ``(f, g, key)`` order, so equal-cost
        boards are expanded in a fixed order and the returned path is
        reproducible.  A state whose cost exceeds ``config.max_cost`` and
        is not the goal stops the search as ``ABORTED``.

        Raises ``InvalidBoardError`` for a malformed board.
        """
        board.validate()
        if not is_solvable(board):
            logger.info("Board %s is unsolvable; skipping search", list(board.tiles))
            return SearchResult(SearchOutcome.UNSOLVABLE, board)

        start = SearchState(
            board=board,
            blank_index=board.blank_index,
            cost=0,
            heuristic=manhattan_distance(board),
        )
        tie = itertools.count()
        frontier: list[tuple[int, int, bytes, int, SearchState]] = [
            (start.f_score, start.cost, start.key, next(tie), start)
        ]
        best_cost: dict[bytes, int] = {start.key: 0}
        closed: set[bytes] = set()
        expanded = 0

        while frontier:
            _, cost, key, _, current = heapq.heappop(frontier)
            if key in closed or cost > best_cost[key]:
                continue
            del best_cost[key]
            closed.add(key)
            expanded += 1

            if current.board.is_solved():
                logger.debug(
                    "Solved in %d moves after expanding %d states",
                    current.cost, expanded,
                )
                return SearchResult(
                    SearchOutcome.FOUND, board, current.moves, expanded
                )

            if config.max_cost is not None and current.cost > config.max_cost:
                logger.warning(
                    "Search aborted: path cost %d exceeds bound %d "
                    "(%d states expanded)",
                    current.cost, config.max_cost, expanded,
                )
                return SearchResult(SearchOutcome.ABORTED, board, (), expanded)

            for move in legal_moves(current):
                nxt = current.board.apply(move)
                nkey = nxt.key
                if nkey in closed:
                    continue
                ncost = current.cost + 1
                known = best_cost.get(nkey)
                if known is not None and ncost >= known:
                    continue
                best_cost[nkey] = ncost
                state = SearchState(
                    board=nxt,
                    blank_index=move.from_index,
                    cost=ncost,
                    heuristic=manhattan_distance(nxt),
                    moves=current.moves + (move,),
                )
                heapq.heappush(
                    frontier, (state.f_score, ncost, nkey, next(tie), state)
                )

        logger.warning("Search exhausted after expanding %d states", expanded)
        return SearchResult(SearchOutcome.EXHAUSTED, board, (), expanded)

    @staticmethod
    def solve(board: Board, config: SolverConfig = DEFAULT_CONFIG) -> list[SolutionStep]:
        """Return the optimal solution trace for *board*, or ``[]``.

        ``[]`` covers unsolvable boards, an exhausted frontier and an
        aborted search alike; use :meth:`search` to tell them apart.
        """
        return Solver.search(board, config).steps()

    @staticmethod
    def hint(board: Board, config: SolverConfig = DEFAULT_CONFIG) -> Move | None:
        """Return the first move of an optimal solution, or ``None``."""
        board.validate()
        if board.is_solved():
            return None
        result = Solver.search(board, config)
        return result.moves[0] if result.found else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        board.validate()
        return is_solvable(board)
