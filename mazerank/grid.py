"""Cell/wall data structure for rectangular mazes.

A :class:`Grid` owns its cells and is the only place walls are opened. Interior
walls are always cleared on both sides at once so that, for any two adjacent
cells, the flags on the shared side agree. Boundary walls are opened only for
the entrance and exit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List

import numpy as np

from .base import DIRECTIONS, EAST, NORTH, OFFSETS, OPPOSITE, SOUTH, WEST, Coordinate

# Axis 2 of the wall array follows DIRECTIONS.
WALL_AXIS = {direction: index for index, direction in enumerate(DIRECTIONS)}


def _closed_walls() -> Dict[str, bool]:
    return {direction: True for direction in DIRECTIONS}


@dataclass
class Cell:
    row: int
    col: int
    walls: Dict[str, bool] = field(default_factory=_closed_walls)


class Grid:
    """Row-major ``height x width`` grid of :class:`Cell` objects."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells: List[List[Cell]] = [
            [Cell(row, col) for col in range(width)] for row in range(height)
        ]
        self._frozen = False

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and all(a.walls == b.walls for a, b in zip(self, other))
        )

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Disallow any further wall changes."""

        self._frozen = True

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def on_boundary(self, row: int, col: int, side: str) -> bool:
        """True when ``(row, col)`` is an in-bounds cell whose ``side`` wall is an outer wall."""

        if side not in OFFSETS or not self.in_bounds(row, col):
            return False
        dr, dc = OFFSETS[side]
        return not self.in_bounds(row + dr, col + dc)

    def is_corner(self, row: int, col: int) -> bool:
        return row in (0, self.height - 1) and col in (0, self.width - 1)

    def cell(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self.width}x{self.height} grid")
        return self.cells[row][col]

    # ------------------------------------------------------------------

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("grid is frozen; walls can only change during generation")

    def remove_wall(self, row: int, col: int, direction: str) -> Cell:
        """Open the wall between ``(row, col)`` and its neighbour in ``direction``.

        Both cells' flags on the shared side are cleared. Returns the neighbour.
        """

        self._check_mutable()
        current = self.cell(row, col)
        dr, dc = OFFSETS[direction]
        nr, nc = row + dr, col + dc
        if not self.in_bounds(nr, nc):
            raise ValueError(
                f"no neighbour {direction} of ({row}, {col}); use open_boundary for outer walls"
            )
        neighbor = self.cells[nr][nc]
        current.walls[direction] = False
        neighbor.walls[OPPOSITE[direction]] = False
        return neighbor

    def remove_wall_between(self, a: Coordinate, b: Coordinate) -> None:
        delta = (b[0] - a[0], b[1] - a[1])
        for direction, offset in OFFSETS.items():
            if offset == delta:
                self.remove_wall(a[0], a[1], direction)
                return
        raise ValueError(f"cells {a} and {b} are not adjacent")

    def carve_path(self, cells: Iterable[Coordinate]) -> None:
        """Open the walls along a sequence of adjacent cells."""

        previous = None
        for current in cells:
            if previous is not None:
                self.remove_wall_between(previous, current)
            previous = current

    def open_boundary(self, row: int, col: int, side: str) -> None:
        self._check_mutable()
        cell = self.cell(row, col)
        if not self.on_boundary(row, col, side):
            raise ValueError(f"cell ({row}, {col}) is not on the {side} boundary")
        cell.walls[side] = False

    # ------------------------------------------------------------------

    def accessible_neighbors(self, row: int, col: int) -> List[Coordinate]:
        """Neighbours reachable through an open wall, in N/E/S/W order.

        Only the wall flag of ``(row, col)`` is consulted; boundary openings
        never yield a neighbour.
        """

        cell = self.cell(row, col)
        neighbors: List[Coordinate] = []
        for direction in DIRECTIONS:
            if cell.walls[direction]:
                continue
            dr, dc = OFFSETS[direction]
            nr, nc = row + dr, col + dc
            if self.in_bounds(nr, nc):
                neighbors.append((nr, nc))
        return neighbors

    def wall_array(self) -> np.ndarray:
        """Wall flags as a ``(height, width, 4)`` bool array (N, E, S, W)."""

        walls = np.ones((self.height, self.width, len(DIRECTIONS)), dtype=bool)
        for cell in self:
            for direction, index in WALL_AXIS.items():
                walls[cell.row, cell.col, index] = cell.walls[direction]
        return walls

    @classmethod
    def from_wall_array(cls, walls: np.ndarray) -> "Grid":
        array = np.asarray(walls, dtype=bool)
        if array.ndim != 3 or array.shape[2] != len(DIRECTIONS):
            raise ValueError(f"wall array must have shape (height, width, 4), got {array.shape}")
        height, width = int(array.shape[0]), int(array.shape[1])
        north, east, south, west = (WALL_AXIS[d] for d in (NORTH, EAST, SOUTH, WEST))
        if not np.array_equal(array[:, :-1, east], array[:, 1:, west]) or not np.array_equal(
            array[:-1, :, south], array[1:, :, north]
        ):
            raise ValueError("wall array is not symmetric between adjacent cells")
        grid = cls(width, height)
        for cell in grid:
            for direction, index in WALL_AXIS.items():
                cell.walls[direction] = bool(array[cell.row, cell.col, index])
        return grid

    def passage_count(self) -> int:
        """Number of open interior walls (edges of the passage graph)."""

        walls = self.wall_array()
        horizontal = np.count_nonzero(~walls[:, :-1, WALL_AXIS[EAST]])
        vertical = np.count_nonzero(~walls[:-1, :, WALL_AXIS[SOUTH]])
        return int(horizontal + vertical)

    def dead_end_cells(self) -> List[Coordinate]:
        """Cells with exactly one open side (boundary openings included)."""

        open_sides = np.count_nonzero(~self.wall_array(), axis=2)
        return [(int(row), int(col)) for row, col in np.argwhere(open_sides == 1)]


__all__ = ["Cell", "Grid", "WALL_AXIS"]
