"""Maze topology analysis and difficulty scoring package."""

__all__ = [
    "AlternatePathDetail",
    "BranchPoint",
    "DifficultyBreakdown",
    "DifficultyResult",
    "MazeAnalysis",
    "TopologyAnalysis",
    "analyze_maze",
    "analyze_topology",
    "difficulty_label",
    "explore_branch",
    "identify_branch_points",
    "score_difficulty",
]

from .topology import (
    AlternatePathDetail,
    BranchPoint,
    TopologyAnalysis,
    analyze_topology,
    explore_branch,
    identify_branch_points,
)
from .scorer import DifficultyBreakdown, DifficultyResult, difficulty_label, score_difficulty
from .analysis import MazeAnalysis, analyze_maze
