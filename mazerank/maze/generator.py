"""Depth-first backtracking maze generator with seeded entrance/exit placement."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..base import DIRECTIONS, EAST, NORTH, OFFSETS, OPPOSITE, SOUTH, WEST, Coordinate, InvalidDimensionError
from ..grid import Cell, Grid
from ..random_source import RandomSource

logger = logging.getLogger(__name__)

MIN_SIZE = 3


@dataclass(frozen=True)
class Opening:
    """Entrance or exit: a boundary cell and the side whose wall is open."""

    row: int
    col: int
    side: str

    @property
    def position(self) -> Coordinate:
        return (self.row, self.col)

    def to_dict(self) -> dict:
        return {"row": self.row, "col": self.col, "side": self.side}


@dataclass
class Maze:
    width: int
    height: int
    seed: int
    grid: Grid
    entrance: Opening
    exit: Opening

    def cell(self, row: int, col: int) -> Cell:
        return self.grid.cell(row, col)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "seed": self.seed,
            "grid": [[dict(cell.walls) for cell in row] for row in self.grid.cells],
            "entrance": self.entrance.to_dict(),
            "exit": self.exit.to_dict(),
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Maze":
        rows = payload["grid"]
        walls = np.array(
            [[[bool(cell[direction]) for direction in DIRECTIONS] for cell in row] for row in rows],
            dtype=bool,
        )
        grid = Grid.from_wall_array(walls)
        if (grid.width, grid.height) != (int(payload["width"]), int(payload["height"])):
            raise ValueError(
                f"grid is {grid.width}x{grid.height} but payload declares "
                f"{payload['width']}x{payload['height']}"
            )
        entrance = _load_opening(grid, payload["entrance"], "entrance")
        exit_ = _load_opening(grid, payload["exit"], "exit")
        if entrance.position == exit_.position:
            raise ValueError(f"entrance and exit share cell {entrance.position}")
        grid.freeze()
        return cls(
            width=grid.width,
            height=grid.height,
            seed=int(payload["seed"]),
            grid=grid,
            entrance=entrance,
            exit=exit_,
        )


def _load_opening(grid: Grid, record: Dict[str, Any], role: str) -> Opening:
    try:
        opening = Opening(row=int(record["row"]), col=int(record["col"]), side=str(record["side"]))
    except (KeyError, TypeError) as exc:
        raise ValueError(f"{role} must have 'row', 'col' and 'side', got {record!r}") from exc
    if opening.side not in DIRECTIONS:
        raise ValueError(f"{role} side must be one of {', '.join(DIRECTIONS)}, got {opening.side!r}")
    if not grid.in_bounds(opening.row, opening.col):
        raise ValueError(
            f"{role} ({opening.row}, {opening.col}) outside {grid.width}x{grid.height} grid"
        )
    if not grid.on_boundary(opening.row, opening.col, opening.side):
        raise ValueError(f"{role} ({opening.row}, {opening.col}) is not on the {opening.side} boundary")
    if grid.is_corner(opening.row, opening.col):
        raise ValueError(f"{role} ({opening.row}, {opening.col}) is a corner cell")
    if grid.cells[opening.row][opening.col].walls[opening.side]:
        raise ValueError(f"{role} {opening.side} wall at ({opening.row}, {opening.col}) is closed")
    return opening


class MazeGenerator:
    """Carve perfect mazes with an explicit-stack depth-first backtracker."""

    DEFAULT_WIDTH = 10
    DEFAULT_HEIGHT = 10
    SIDES: Tuple[str, ...] = (NORTH, EAST, SOUTH, WEST)

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDimensionError(f"{name} must be an integer, got {value!r}")
            if value < MIN_SIZE:
                raise InvalidDimensionError(f"{name} must be at least {MIN_SIZE}, got {value}")
        self.width = width
        self.height = height

    def create_maze(self, seed: int) -> Maze:
        rng = RandomSource(seed)
        grid = Grid(self.width, self.height)
        self._carve(grid, rng)
        entrance, exit_ = self._place_openings(grid, rng)
        grid.freeze()
        logger.debug(
            "Generated %dx%d maze (seed=%d) entrance=%s exit=%s",
            self.width,
            self.height,
            seed,
            entrance,
            exit_,
        )
        return Maze(
            width=self.width,
            height=self.height,
            seed=seed,
            grid=grid,
            entrance=entrance,
            exit=exit_,
        )

    # ------------------------------------------------------------------

    def _carve(self, grid: Grid, rng: RandomSource) -> None:
        visited = [[False for _ in range(self.width)] for _ in range(self.height)]
        start = (rng.next_int(0, self.height - 1), rng.next_int(0, self.width - 1))
        logger.debug("Carving from start cell %s", start)
        visited[start[0]][start[1]] = True
        stack: List[Coordinate] = [start]

        while stack:
            row, col = stack[-1]
            candidates = self._unvisited_neighbors(visited, row, col)
            if not candidates:
                stack.pop()
                continue
            direction, (nr, nc) = candidates[rng.next_int(0, len(candidates) - 1)]
            grid.remove_wall(row, col, direction)
            visited[nr][nc] = True
            stack.append((nr, nc))

    def _unvisited_neighbors(
        self,
        visited: List[List[bool]],
        row: int,
        col: int,
    ) -> List[Tuple[str, Coordinate]]:
        neighbors: List[Tuple[str, Coordinate]] = []
        for direction in DIRECTIONS:
            dr, dc = OFFSETS[direction]
            nr, nc = row + dr, col + dc
            if 0 <= nr < self.height and 0 <= nc < self.width and not visited[nr][nc]:
                neighbors.append((direction, (nr, nc)))
        return neighbors

    def _place_openings(self, grid: Grid, rng: RandomSource) -> Tuple[Opening, Opening]:
        entrance_side = self.SIDES[rng.next_int(0, len(self.SIDES) - 1)]
        entrance = self._open_side(grid, rng, entrance_side)
        exit_ = self._open_side(grid, rng, OPPOSITE[entrance_side])
        return entrance, exit_

    def _open_side(self, grid: Grid, rng: RandomSource, side: str) -> Opening:
        # Corners are skipped, so each side draws from [1, dimension - 2].
        if side in (NORTH, SOUTH):
            col = rng.next_int(1, self.width - 2)
            row = 0 if side == NORTH else self.height - 1
        else:
            row = rng.next_int(1, self.height - 2)
            col = self.width - 1 if side == EAST else 0
        grid.open_boundary(row, col, side)
        return Opening(row=row, col=col, side=side)


def generate_maze(width: int, height: int, seed: int) -> Maze:
    """Generate a perfect ``width x height`` maze from ``seed``."""

    return MazeGenerator(width, height).create_maze(seed)


__all__ = ["Maze", "MazeGenerator", "Opening", "generate_maze", "MIN_SIZE"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a seeded perfect maze and print it as JSON")
    parser.add_argument("width", type=int, help="Number of columns (at least 3)")
    parser.add_argument("height", type=int, help="Number of rows (at least 3)")
    parser.add_argument("--seed", type=int, required=True, help="Positive generator seed")
    parser.add_argument("--indent", type=int, default=2)
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    maze = generate_maze(args.width, args.height, args.seed)
    print(json.dumps(maze.to_dict(), indent=args.indent))


if __name__ == "__main__":
    main()
