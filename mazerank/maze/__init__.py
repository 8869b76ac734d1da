"""Maze generation and solving package."""

__all__ = [
    "Maze",
    "MazeGenerator",
    "Opening",
    "SolutionPath",
    "generate_maze",
    "solve_path",
]

from .generator import Maze, MazeGenerator, Opening, generate_maze
from .solver import SolutionPath, solve_path
