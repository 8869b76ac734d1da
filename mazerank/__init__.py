"""Seeded perfect-maze generation, solving, and difficulty scoring."""

__all__ = [
    "RandomSource",
    "Cell",
    "Grid",
    "Maze",
    "MazeGenerator",
    "Opening",
    "SolutionPath",
    "BranchPoint",
    "AlternatePathDetail",
    "TopologyAnalysis",
    "DifficultyBreakdown",
    "DifficultyResult",
    "MazeAnalysis",
    "MazeError",
    "InvalidDimensionError",
    "InvalidSeedError",
    "DegenerateMazeError",
    "generate_maze",
    "solve_path",
    "analyze_topology",
    "score_difficulty",
    "difficulty_label",
    "analyze_maze",
]

from .base import DegenerateMazeError, InvalidDimensionError, InvalidSeedError, MazeError
from .random_source import RandomSource
from .grid import Cell, Grid
from .maze import Maze, MazeGenerator, Opening, SolutionPath, generate_maze, solve_path
from .difficulty import (
    AlternatePathDetail,
    BranchPoint,
    DifficultyBreakdown,
    DifficultyResult,
    MazeAnalysis,
    TopologyAnalysis,
    analyze_maze,
    analyze_topology,
    difficulty_label,
    score_difficulty,
)
