"""Shared direction constants and error types."""

from __future__ import annotations

from typing import Dict, Tuple

Coordinate = Tuple[int, int]

NORTH = "north"
EAST = "east"
SOUTH = "south"
WEST = "west"

# Order matters: neighbour expansion and side selection both follow it.
DIRECTIONS: Tuple[str, ...] = (NORTH, EAST, SOUTH, WEST)

OPPOSITE: Dict[str, str] = {
    NORTH: SOUTH,
    EAST: WEST,
    SOUTH: NORTH,
    WEST: EAST,
}

OFFSETS: Dict[str, Coordinate] = {
    NORTH: (-1, 0),
    EAST: (0, 1),
    SOUTH: (1, 0),
    WEST: (0, -1),
}


class MazeError(Exception):
    """Base class for maze generation and analysis failures."""


class InvalidDimensionError(MazeError, ValueError):
    """Raised when a maze is requested with a width or height below the minimum."""


class InvalidSeedError(MazeError, ValueError):
    """Raised when a seed cannot drive the Park-Miller generator."""


class DegenerateMazeError(MazeError, RuntimeError):
    """Raised when a generated maze has no path from entrance to exit."""


def manhattan(a: Coordinate, b: Coordinate) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


__all__ = [
    "Coordinate",
    "NORTH",
    "EAST",
    "SOUTH",
    "WEST",
    "DIRECTIONS",
    "OPPOSITE",
    "OFFSETS",
    "MazeError",
    "InvalidDimensionError",
    "InvalidSeedError",
    "DegenerateMazeError",
    "manhattan",
]
