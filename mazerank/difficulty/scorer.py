"""Multi-factor difficulty score for a solved and analyzed maze.

The score combines two primary components, branch complexity (55%) and
decision points (45%), and scales them by four adjustment factors: maze
size, solution length relative to the maze, absolute solution length, and
false-path density. The result is clamped to ``[1, 100]`` and the part above
70 is gently compressed. All constants were tuned empirically and must stay
as they are for scores to remain comparable.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from ..base import Coordinate
from .topology import AlternatePathDetail, BranchPoint

if TYPE_CHECKING:  # pragma: no cover
    from ..maze.generator import Maze

BRANCH_COMPLEXITY_WEIGHT = 0.55
DECISION_POINT_WEIGHT = 0.45

MIN_BRANCH_COMPLEXITY = 10.0
MIN_DECISION_POINTS = 5.0
MAX_COMPONENT = 100.0

MIN_SCORE = 1
MAX_SCORE = 100

COMPRESSION_THRESHOLD = 70
COMPRESSION_BASE = 0.93
COMPRESSION_SPAN = 300

HARD_THRESHOLD = 90
MEDIUM_THRESHOLD = 70


@dataclass(frozen=True)
class DifficultyBreakdown:
    branch_complexity: float
    decision_points: float
    size_adjustment: float
    solution_length_factor: float
    absolute_path_adjustment: float
    false_path_density_factor: float
    solution_path_length: int

    def to_dict(self) -> dict:
        return {
            "branch_complexity": self.branch_complexity,
            "decision_points": self.decision_points,
            "size_adjustment": self.size_adjustment,
            "solution_length_factor": self.solution_length_factor,
            "absolute_path_adjustment": self.absolute_path_adjustment,
            "false_path_density_factor": self.false_path_density_factor,
            "solution_path_length": self.solution_path_length,
        }


@dataclass(frozen=True)
class DifficultyResult:
    score: int
    breakdown: DifficultyBreakdown

    @property
    def label(self) -> str:
        return difficulty_label(self.score)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "label": self.label,
            "breakdown": self.breakdown.to_dict(),
        }


def difficulty_label(score: Optional[int]) -> str:
    if not score:
        return "Unknown"
    if score > HARD_THRESHOLD:
        return "Hard"
    if score > MEDIUM_THRESHOLD:
        return "Medium"
    return "Easy"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


# ----------------------------------------------------------------------
# Primary components


def branch_complexity_score(
    width: int,
    height: int,
    path_length: int,
    alternate_paths: Sequence[AlternatePathDetail],
) -> float:
    if not alternate_paths:
        return MIN_BRANCH_COMPLEXITY

    area = width * height
    root_area = math.sqrt(area)
    path_length_factor = min(1.0, path_length / 30)
    total = 0.0

    for branch in alternate_paths:
        # Branches closer to the exit weigh more.
        distance = max(1, branch.distance_from_exit)
        position_factor = 1 + (width + height - distance) / (width + height * 2)

        length_factor = branch.length / (area * 0.3) * 1.2
        long_path_bonus = 1.5 if branch.length > area * 0.1 else 1.0
        branch_factor = branch.sub_branches * 1.2
        depth_factor = branch.max_depth / root_area * 1.5

        dead_end_factor = 1.0
        if branch.dead_end:
            if branch.length < 5:
                dead_end_factor = 0.9
            else:
                length_score = min(2.0, 1.0 + branch.length / 25)
                depth_score = min(1.5, 1.0 + branch.max_depth / 15)
                dead_end_factor = length_score * 0.6 + depth_score * 0.4

        total += (
            (length_factor + branch_factor + depth_factor)
            * position_factor
            * dead_end_factor
            * path_length_factor
            * long_path_bonus
        )

    return _clamp(total / root_area, MIN_BRANCH_COMPLEXITY, MAX_COMPONENT)


def decision_point_score(
    width: int,
    height: int,
    path_length: int,
    branch_points: Sequence[BranchPoint],
) -> float:
    if not branch_points:
        return MIN_DECISION_POINTS

    count = len(branch_points)
    path_length_factor = min(1.0, path_length / 25)
    base_score = (count / math.sqrt(width * height)) * 45 * path_length_factor

    # Evenly spread decision points are harder than clustered ones.
    distribution_score = 0.0
    if count > 1:
        even_spacing = path_length / (count + 1)
        total_variance = 0.0
        for index, point in enumerate(branch_points):
            expected = even_spacing * (index + 1)
            total_variance += abs(point.position - expected) / path_length
        average_variance = total_variance / count
        distribution_score = 30 * (1 - average_variance) * path_length_factor

    return _clamp(base_score + distribution_score, MIN_DECISION_POINTS, MAX_COMPONENT)


# ----------------------------------------------------------------------
# Adjustment factors


def size_adjustment(width: int, height: int) -> float:
    area = width * height
    if area < 100:
        return 0.2 + (area / 100) * 0.4
    if area < 400:
        return 0.6 + ((area - 100) / 300) * 0.3
    if area < 900:
        return 0.9 + ((area - 400) / 500) * 0.15
    return 1.05 + min(0.1, (area - 900) / 3000)


def solution_length_factor(width: int, height: int, path_length: int) -> float:
    if path_length == 0:
        return 0.5
    ratio = path_length / math.sqrt(width * height)
    return min(1.05, 0.8 + ratio / 15)


def absolute_path_adjustment(path_length: int) -> float:
    if path_length == 0:
        return 0.5
    if path_length < 15:
        return 0.3 + (path_length / 15) * 0.4
    if path_length < 30:
        return 0.7 + ((path_length - 15) / 15) * 0.2
    return 0.9 + min(0.1, (path_length - 30) / 100)


def false_path_density_factor(
    width: int,
    height: int,
    path_length: int,
    alternate_paths: Sequence[AlternatePathDetail],
) -> float:
    area = width * height
    count = len(alternate_paths)
    cell_ratio = sum(branch.length for branch in alternate_paths) / area
    path_ratio = count / (path_length or 1)

    if count < 3:
        return 0.5 + count * 0.1

    expected = math.sqrt(area) / 3
    density_ratio = min(1.5, count / expected)
    return min(1.0, 0.75 + cell_ratio * 0.5 + path_ratio * 0.25 + density_ratio * 0.25)


def _compress(score: int) -> int:
    if score <= COMPRESSION_THRESHOLD:
        return score
    excess = score - COMPRESSION_THRESHOLD
    factor = COMPRESSION_BASE + excess / COMPRESSION_SPAN
    compressed = COMPRESSION_THRESHOLD + excess * factor
    return int(_clamp(_round_half_up(compressed), MIN_SCORE, MAX_SCORE))


def score_difficulty(
    maze: "Maze",
    solution_path: Sequence[Coordinate],
    branch_points: Sequence[BranchPoint],
    alternate_paths: Sequence[AlternatePathDetail],
) -> DifficultyResult:
    """Score a maze from its solution path and topology.

    Total over every maze value: an empty solution path still produces a
    breakdown and the minimum score.
    """

    width, height = maze.width, maze.height
    path_length = len(solution_path)

    breakdown = DifficultyBreakdown(
        branch_complexity=branch_complexity_score(width, height, path_length, alternate_paths),
        decision_points=decision_point_score(width, height, path_length, branch_points),
        size_adjustment=size_adjustment(width, height),
        solution_length_factor=solution_length_factor(width, height, path_length),
        absolute_path_adjustment=absolute_path_adjustment(path_length),
        false_path_density_factor=false_path_density_factor(width, height, path_length, alternate_paths),
        solution_path_length=path_length,
    )

    if path_length == 0:
        return DifficultyResult(score=MIN_SCORE, breakdown=breakdown)

    difficulty = (
        BRANCH_COMPLEXITY_WEIGHT * breakdown.branch_complexity
        + DECISION_POINT_WEIGHT * breakdown.decision_points
    )
    difficulty = (
        difficulty
        * breakdown.size_adjustment
        * breakdown.solution_length_factor
        * breakdown.absolute_path_adjustment
        * breakdown.false_path_density_factor
    )
    score = int(_clamp(_round_half_up(difficulty), MIN_SCORE, MAX_SCORE))
    return DifficultyResult(score=_compress(score), breakdown=breakdown)


__all__ = [
    "DifficultyBreakdown",
    "DifficultyResult",
    "absolute_path_adjustment",
    "branch_complexity_score",
    "decision_point_score",
    "difficulty_label",
    "false_path_density_factor",
    "score_difficulty",
    "size_adjustment",
    "solution_length_factor",
]
