"""End-to-end maze analysis: solve, classify branches, score, and report."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..base import Coordinate, DegenerateMazeError
from ..maze.generator import Maze, generate_maze
from ..maze.solver import solve_path
from .scorer import DifficultyResult, score_difficulty
from .topology import TopologyAnalysis, analyze_topology

logger = logging.getLogger(__name__)


@dataclass
class MazeAnalysis:
    """Everything derived from one maze, detached from the maze itself."""

    width: int
    height: int
    seed: int
    solution_path: List[Coordinate]
    topology: TopologyAnalysis
    difficulty: DifficultyResult
    dead_end_cells: List[Coordinate] = field(default_factory=list)

    @property
    def score(self) -> int:
        return self.difficulty.score

    @property
    def label(self) -> str:
        return self.difficulty.label

    def to_dict(self) -> Dict[str, Any]:
        area = self.width * self.height
        branches = self.topology.alternate_paths
        dead_ends = [branch for branch in branches if branch.dead_end]
        dead_end_total = sum(branch.length for branch in dead_ends)

        return {
            "seed": self.seed,
            "difficulty": self.difficulty.to_dict(),
            "solution": {
                "length": len(self.solution_path),
                "path_percentage": len(self.solution_path) / area * 100,
                "path": [list(cell) for cell in self.solution_path],
            },
            "branching_points": {
                "count": len(self.topology.branch_points),
                "details": [
                    {
                        "position": point.position,
                        "location": {"row": point.row, "col": point.col},
                        "branch_count": len(point.branches),
                    }
                    for point in self.topology.branch_points
                ],
            },
            "alternate_paths": {
                "total_count": len(branches),
                "total_length": sum(branch.length for branch in branches),
                "dead_end_count": len(dead_ends),
                "total_sub_branches": sum(branch.sub_branches for branch in branches),
                "max_depth": max((branch.max_depth for branch in branches), default=0),
                "details": [branch.to_dict() for branch in branches],
            },
            "dead_ends": {
                "count": len(dead_ends),
                "total_length": dead_end_total,
                "average_length": dead_end_total / len(dead_ends) if dead_ends else 0,
                "max_length": max((branch.length for branch in dead_ends), default=0),
                "max_depth": max((branch.max_depth for branch in dead_ends), default=0),
            },
            "maze_properties": {
                "width": self.width,
                "height": self.height,
                "cell_count": area,
                "dead_end_cells": len(self.dead_end_cells),
            },
        }


def analyze_maze(maze: Maze, *, strict: bool = False) -> MazeAnalysis:
    """Run the full pipeline on ``maze``.

    With ``strict=True`` a maze whose exit is unreachable raises
    :class:`DegenerateMazeError`; otherwise it is reported with the minimum
    score.
    """

    solution_path = solve_path(maze)
    if not solution_path:
        message = (
            f"no path from entrance {maze.entrance.position} to exit {maze.exit.position} "
            f"in {maze.width}x{maze.height} maze (seed={maze.seed})"
        )
        if strict:
            raise DegenerateMazeError(message)
        logger.warning("Degenerate maze: %s", message)

    topology = analyze_topology(maze, solution_path)
    difficulty = score_difficulty(maze, solution_path, topology.branch_points, topology.alternate_paths)
    logger.debug(
        "Scored maze seed=%d: %d (%s), %d branch points, %d alternate paths",
        maze.seed,
        difficulty.score,
        difficulty.label,
        len(topology.branch_points),
        len(topology.alternate_paths),
    )
    return MazeAnalysis(
        width=maze.width,
        height=maze.height,
        seed=maze.seed,
        solution_path=solution_path,
        topology=topology,
        difficulty=difficulty,
        dead_end_cells=maze.grid.dead_end_cells(),
    )


__all__ = ["MazeAnalysis", "analyze_maze"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate (or load) a maze and report its difficulty")
    parser.add_argument("width", type=int, nargs="?", help="Number of columns (at least 3)")
    parser.add_argument("height", type=int, nargs="?", help="Number of rows (at least 3)")
    parser.add_argument("--seed", type=int, default=None, help="Positive generator seed")
    parser.add_argument("--input", type=Path, default=None, help="Score a maze JSON written by mazerank-generate")
    parser.add_argument("--summary", action="store_true", help="Only print score, label and breakdown")
    parser.add_argument("--strict", action="store_true", help="Fail when the exit is unreachable")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if args.input is not None and (args.width is not None or args.height is not None or args.seed is not None):
        parser.error("width, height and --seed come from the file when --input is given")
    if args.input is None and (args.width is None or args.height is None or args.seed is None):
        parser.error("width, height and --seed are required unless --input is given")
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    if args.input is not None:
        maze = Maze.from_dict(json.loads(args.input.read_text(encoding="utf-8")))
    else:
        maze = generate_maze(args.width, args.height, args.seed)
    analysis = analyze_maze(maze, strict=args.strict)
    payload = analysis.difficulty.to_dict() if args.summary else analysis.to_dict()
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
