"""Solver configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """Tunables shared by the solver, the generator and the request layer.

    ``max_cost`` bounds the path cost the search may expand before it
    gives up.  An optimal solution longer than the bound is reported as
    "no solution found"; ``None`` removes the bound.
    """

    max_cost: int | None = 100
    shuffle_moves: int = 1000
    supported_sizes: tuple[int, ...] = (3, 4)


DEFAULT_CONFIG = SolverConfig()
