"""Monte-Carlo generator: random positions with retries.

Each pass shuffles the frames and drops every one at a random position
inside the margin-reduced wall, retrying a bounded number of times before
giving up on it. Many independent passes run under the search budget and
the result is returned best first.
"""

from __future__ import annotations

from typing import Sequence

from gallerywall.domain.services import (
    has_collision,
    is_within_bounds,
    mean_center_distance,
)
from gallerywall.domain.value_objects import (
    InventoryItem,
    LayoutSolution,
    PlacedFrame,
    RecommenderInput,
    Rect,
)

from .base import SearchingGenerator
from .search import finalize_solution, place_frame

MAX_PLACEMENT_TRIES = 50
ROTATION_CHANCE = 0.2


class MonteCarloGenerator(SearchingGenerator):
    """Randomized placement strategy, the fallback for unknown algorithms."""

    name = "monte_carlo"
    desired_solutions = 4

    def _try_place(
        self,
        data: RecommenderInput,
        item: InventoryItem,
        placed: Sequence[PlacedFrame],
    ) -> PlacedFrame | None:
        usable = data.usable_bounds
        margin = data.config.margin
        for _ in range(MAX_PLACEMENT_TRIES):
            rotation = 90 if self._rng.random() < ROTATION_CHANCE else 0
            width, height = item.width, item.height
            if rotation == 90:
                width, height = height, width

            min_x, min_y = margin, margin
            max_x = data.wall.width - width - margin
            max_y = data.wall.height - height - margin
            if max_x < min_x or max_y < min_y:
                continue

            x = min_x + self._rng.random() * (max_x - min_x)
            y = min_y + self._rng.random() * (max_y - min_y)
            candidate = Rect(x, y, width, height)
            if not is_within_bounds(candidate, usable):
                continue
            if has_collision(candidate, [*data.obstacles, *placed], data.config.spacing):
                continue
            return place_frame(item, x, y, rotation)
        return None

    def _build(
        self, data: RecommenderInput, frames: Sequence[InventoryItem]
    ) -> LayoutSolution:
        placed: list[PlacedFrame] = []
        for item in frames:
            frame = self._try_place(data, item, placed)
            if frame is None:
                if data.config.force_all:
                    return LayoutSolution.empty()
                continue
            placed.append(frame)
        return finalize_solution(data, placed)

    def _rank(
        self, data: RecommenderInput, solutions: list[LayoutSolution]
    ) -> list[LayoutSolution]:
        """Most frames first; ties go to the layout hugging the centre."""
        return sorted(
            solutions,
            key=lambda s: (-s.score, mean_center_distance(s.frames, data)),
        )


__all__ = ["MonteCarloGenerator"]
