"""Branch-point detection and breadth-first exploration of side passages.

Both passes are read-only over a maze and its solution path. Every solution
cell except the two endpoints that opens onto a cell off the path is a branch
point. Each such opening is explored as an alternate path.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, AbstractSet, Deque, List, Sequence, Set, Tuple

from ..base import Coordinate, manhattan

if TYPE_CHECKING:  # pragma: no cover
    from ..maze.generator import Maze


@dataclass
class BranchPoint:
    position: int
    row: int
    col: int
    branches: List[Coordinate]


@dataclass
class BranchExploration:
    """Raw BFS statistics for one branch."""

    length: int
    dead_end: bool
    sub_branches: int
    max_depth: int


@dataclass
class AlternatePathDetail:
    start_position: int
    start_row: int
    start_col: int
    length: int
    dead_end: bool
    sub_branches: int
    max_depth: int
    distance_from_exit: int

    def to_dict(self) -> dict:
        return {
            "start_position": self.start_position,
            "start_row": self.start_row,
            "start_col": self.start_col,
            "length": self.length,
            "dead_end": self.dead_end,
            "sub_branches": self.sub_branches,
            "max_depth": self.max_depth,
            "distance_from_exit": self.distance_from_exit,
        }


@dataclass
class TopologyAnalysis:
    branch_points: List[BranchPoint] = field(default_factory=list)
    alternate_paths: List[AlternatePathDetail] = field(default_factory=list)


def identify_branch_points(maze: "Maze", solution_path: Sequence[Coordinate]) -> List[BranchPoint]:
    on_path = set(solution_path)
    branch_points: List[BranchPoint] = []
    # Entrance and exit are never branch points.
    for index in range(1, len(solution_path) - 1):
        row, col = solution_path[index]
        branches = [
            neighbor
            for neighbor in maze.grid.accessible_neighbors(row, col)
            if neighbor not in on_path
        ]
        if branches:
            branch_points.append(BranchPoint(position=index, row=row, col=col, branches=branches))
    return branch_points


def explore_branch(
    maze: "Maze",
    solution_cells: AbstractSet[Coordinate],
    start_row: int,
    start_col: int,
) -> BranchExploration:
    """Breadth-first walk of everything reachable from one branch cell.

    Solution cells are never entered; touching one marks the branch as
    reconnecting. A cell counts as a sub-branch when more than one of its
    open sides leads to a solution cell, an already-seen cell, or a new cell.
    The entry edge is discounted once at the end.
    """

    start = (start_row, start_col)
    visited: Set[Coordinate] = {start}
    queue: Deque[Tuple[Coordinate, int]] = deque([(start, 1)])
    max_depth = 0
    sub_branches = 0
    dead_end = True

    while queue:
        (row, col), depth = queue.popleft()
        max_depth = max(max_depth, depth)
        exits = 0
        for neighbor in maze.grid.accessible_neighbors(row, col):
            exits += 1
            if neighbor in solution_cells:
                dead_end = False
                continue
            if neighbor in visited:
                continue
            visited.add(neighbor)
            queue.append((neighbor, depth + 1))
        if exits > 1:
            sub_branches += 1

    return BranchExploration(
        length=len(visited),
        dead_end=dead_end,
        sub_branches=max(0, sub_branches - 1),
        max_depth=max_depth,
    )


def analyze_topology(maze: "Maze", solution_path: Sequence[Coordinate]) -> TopologyAnalysis:
    solution_cells = frozenset(solution_path)
    exit_position = maze.exit.position
    branch_points = identify_branch_points(maze, solution_path)
    alternate_paths: List[AlternatePathDetail] = []
    for point in branch_points:
        distance = manhattan((point.row, point.col), exit_position)
        for branch_row, branch_col in point.branches:
            explored = explore_branch(maze, solution_cells, branch_row, branch_col)
            alternate_paths.append(
                AlternatePathDetail(
                    start_position=point.position,
                    start_row=point.row,
                    start_col=point.col,
                    length=explored.length,
                    dead_end=explored.dead_end,
                    sub_branches=explored.sub_branches,
                    max_depth=explored.max_depth,
                    distance_from_exit=distance,
                )
            )
    return TopologyAnalysis(branch_points=branch_points, alternate_paths=alternate_paths)


__all__ = [
    "AlternatePathDetail",
    "BranchExploration",
    "BranchPoint",
    "TopologyAnalysis",
    "analyze_topology",
    "explore_branch",
    "identify_branch_points",
]
