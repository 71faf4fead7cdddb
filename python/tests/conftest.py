"""Shared fixtures: exhaustive breadth-first ground truth for small grids."""

from __future__ import annotations

from collections import deque

import pytest


def bfs_distances(size: int) -> dict[tuple[int, ...], int]:
    """Shortest move count from every reachable board to the goal.

    Walks the whole state graph outward from the solved board; moves are
    reversible so distance-from-goal equals distance-to-goal.
    """
    nn = size * size
    blank = nn - 1
    goal = tuple(range(nn))
    adj: list[list[int]] = []
    for i in range(nn):
        r, c = divmod(i, size)
        nb = []
        if r > 0:
            nb.append(i - size)
        if r < size - 1:
            nb.append(i + size)
        if c > 0:
            nb.append(i - 1)
        if c < size - 1:
            nb.append(i + 1)
        adj.append(nb)

    dist = {goal: 0}
    queue = deque([(goal, blank)])
    while queue:
        tiles, b = queue.popleft()
        d = dist[tiles] + 1
        for ni in adj[b]:
            nxt = list(tiles)
            nxt[b], nxt[ni] = nxt[ni], nxt[b]
            key = tuple(nxt)
            if key not in dist:
                dist[key] = d
                queue.append((key, ni))
    return dist


@pytest.fixture(scope="session")
def distances_2x2() -> dict[tuple[int, ...], int]:
    return bfs_distances(2)


@pytest.fixture(scope="session")
def distances_3x3() -> dict[tuple[int, ...], int]:
    return bfs_distances(3)
