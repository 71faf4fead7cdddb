from backend.engine.gamesolver.heuristic import manhattan_distance
from backend.engine.gamesolver.reconstruct import reconstruct
from backend.engine.gamesolver.solvability import count_inversions, is_solvable
from backend.engine.gamesolver.solver import SearchOutcome, SearchResult, Solver

__all__ = [
    "SearchOutcome",
    "SearchResult",
    "Solver",
    "count_inversions",
    "is_solvable",
    "manhattan_distance",
    "reconstruct",
]
