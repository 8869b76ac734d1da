"""A* search for the entrance-to-exit path of a maze."""

from __future__ import annotations

import heapq
import itertools
from typing import TYPE_CHECKING, Dict, List, Optional, Set, Tuple

from ..base import Coordinate, manhattan

if TYPE_CHECKING:  # pragma: no cover
    from .generator import Maze

SolutionPath = List[Coordinate]


def solve_path(maze: "Maze") -> SolutionPath:
    """Return the shortest path from entrance to exit as ``(row, col)`` cells.

    Unit edge costs with a Manhattan heuristic keep A* optimal. Frontier
    entries with equal ``f`` are expanded in the order they were first
    discovered. An empty list means the exit is unreachable.
    """

    start = maze.entrance.position
    goal = maze.exit.position
    grid = maze.grid

    counter = itertools.count()
    order: Dict[Coordinate, int] = {start: next(counter)}
    g_score: Dict[Coordinate, int] = {start: 0}
    parents: Dict[Coordinate, Optional[Coordinate]] = {start: None}
    open_heap: List[Tuple[int, int, Coordinate]] = [(manhattan(start, goal), order[start], start)]
    closed: Set[Coordinate] = set()

    while open_heap:
        _f, _order, current = heapq.heappop(open_heap)
        if current in closed:
            continue
        if current == goal:
            return _reconstruct(parents, goal)
        closed.add(current)

        tentative = g_score[current] + 1
        for neighbor in grid.accessible_neighbors(*current):
            if neighbor in closed:
                continue
            known = g_score.get(neighbor)
            if known is not None and tentative >= known:
                continue
            g_score[neighbor] = tentative
            parents[neighbor] = current
            if neighbor not in order:
                order[neighbor] = next(counter)
            # Improved nodes keep their first insertion index; the old entry goes stale.
            heapq.heappush(
                open_heap,
                (tentative + manhattan(neighbor, goal), order[neighbor], neighbor),
            )

    return []


def _reconstruct(parents: Dict[Coordinate, Optional[Coordinate]], goal: Coordinate) -> SolutionPath:
    path: SolutionPath = []
    node: Optional[Coordinate] = goal
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return path


__all__ = ["SolutionPath", "solve_path"]
