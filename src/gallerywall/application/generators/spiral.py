"""Spiral generator: radial placement outward from the wall centre.

Each frame is first tried centred on the wall. If that spot is taken the
search walks an Archimedean spiral whose radius grows slowly with the
angle, until a free in-bounds spot turns up or the attempt cap runs out.
The cap scales with the distance from the centre to a corner, so larger
walls get proportionally more attempts.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from gallerywall.domain.services import has_collision, is_within_bounds
from gallerywall.domain.value_objects import (
    InventoryItem,
    LayoutSolution,
    PlacedFrame,
    RecommenderInput,
    Rect,
)

from .base import SearchingGenerator
from .search import finalize_solution, place_frame

RADIUS_STEP = 0.5
ANGLE_STEP = 0.1
MIN_SPIRAL_ATTEMPTS = 2000
ATTEMPTS_PER_UNIT_RADIUS = 200


def spiral_attempt_cap(width: float, height: float) -> int:
    """Attempts allowed per frame on a ``width`` x ``height`` wall."""
    max_radius = math.hypot(width / 2, height / 2)
    return max(MIN_SPIRAL_ATTEMPTS, math.ceil(max_radius * ATTEMPTS_PER_UNIT_RADIUS))


def spiral_offsets(limit: int) -> Iterable[tuple[float, float]]:
    """Yield up to ``limit`` (dx, dy) offsets, starting at (0, 0)."""
    radius = 0.0
    angle = 0.0
    for _ in range(limit):
        yield radius * math.cos(angle), radius * math.sin(angle)
        if radius == 0:
            radius += RADIUS_STEP
        else:
            angle += ANGLE_STEP
            radius += RADIUS_STEP * (ANGLE_STEP / (2 * math.pi))


class SpiralGenerator(SearchingGenerator):
    """Centre-out spiral strategy."""

    name = "spiral"
    desired_solutions = 4

    def _seeds(
        self, data: RecommenderInput, frames: Sequence[InventoryItem]
    ) -> Iterable[LayoutSolution]:
        yield self._build(data, sorted(frames, key=lambda f: f.area, reverse=True))

    def _find_spot(
        self,
        data: RecommenderInput,
        item: InventoryItem,
        placed: Sequence[PlacedFrame],
    ) -> PlacedFrame | None:
        usable = data.usable_bounds
        center_x, center_y = data.wall.center
        others = [*data.obstacles, *placed]
        limit = spiral_attempt_cap(data.wall.width, data.wall.height)

        for dx, dy in spiral_offsets(limit):
            x = center_x + dx - item.width / 2
            y = center_y + dy - item.height / 2
            candidate = Rect(x, y, item.width, item.height)
            if is_within_bounds(candidate, usable) and not has_collision(
                candidate, others, data.config.spacing
            ):
                return place_frame(item, x, y)
        return None

    def _build(
        self, data: RecommenderInput, frames: Sequence[InventoryItem]
    ) -> LayoutSolution:
        placed: list[PlacedFrame] = []
        for item in frames:
            frame = self._find_spot(data, item, placed)
            if frame is None:
                if data.config.force_all:
                    return LayoutSolution.empty()
                continue
            placed.append(frame)
        return finalize_solution(data, placed)


__all__ = [
    "SpiralGenerator",
    "spiral_attempt_cap",
    "spiral_offsets",
]
