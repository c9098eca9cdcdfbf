"""Descriptive quality metrics for a finished layout."""

from __future__ import annotations

import math
from typing import Sequence

from ..value_objects import LayoutMetrics, PlacedFrame, RecommenderInput
from .geometry import round_half_up
from .heuristics import available_area

__all__ = [
    "compute_metrics",
    "mean_center_distance",
]


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def _coverage(frames: Sequence[PlacedFrame], area: float) -> float:
    if area <= 0:
        return 0.0
    return _clamp(sum(frame.width * frame.height for frame in frames) / area)


def _alignment(frames: Sequence[PlacedFrame]) -> float:
    if len(frames) < 2:
        return 0.0
    aligned = 0
    for index, frame in enumerate(frames):
        left = round_half_up(frame.x)
        top = round_half_up(frame.y)
        for other_index, other in enumerate(frames):
            if other_index == index:
                continue
            if round_half_up(other.x) == left or round_half_up(other.y) == top:
                aligned += 1
                break
    return aligned / len(frames)


def _balance(frames: Sequence[PlacedFrame], data: RecommenderInput) -> float:
    total_area = sum(frame.width * frame.height for frame in frames)
    if total_area <= 0:
        return 0.0
    cx = sum(frame.center[0] * frame.width * frame.height for frame in frames) / total_area
    cy = sum(frame.center[1] * frame.width * frame.height for frame in frames) / total_area
    wall_cx, wall_cy = data.wall.center
    half_diagonal = math.hypot(data.wall.width, data.wall.height) / 2
    return _clamp(1.0 - math.hypot(cx - wall_cx, cy - wall_cy) / half_diagonal)


def compute_metrics(
    frames: Sequence[PlacedFrame], data: RecommenderInput
) -> LayoutMetrics:
    """Compute coverage, alignment and balance for a set of placements.

    Args:
        frames: The placed frames of one solution.
        data: The request the solution was generated for.

    Returns:
        LayoutMetrics with every value clamped to [0, 1].
    """
    return LayoutMetrics(
        coverage=_coverage(frames, available_area(data)),
        alignment=_alignment(frames),
        balance=_balance(frames, data),
    )


def mean_center_distance(
    frames: Sequence[PlacedFrame], data: RecommenderInput
) -> float:
    """Average distance of frame centres from the wall centre."""
    if not frames:
        return 0.0
    wall_cx, wall_cy = data.wall.center
    return sum(
        math.hypot(frame.center[0] - wall_cx, frame.center[1] - wall_cy)
        for frame in frames
    ) / len(frames)
