"""Skyline generator: frames standing on horizontal shelves.

The wall height is split into ``shelf_count + 1`` equal bands and a shelf
line is drawn at the top of every band below the first. Frames stand on
their shelf (bottom edge on the line). Each frame goes to the shelf with
the least row width among those with enough headroom, or to the lowest
shelf when none has. Each row is then centred and laid out left to right,
sliding a frame right in small steps while it collides with something.
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
from .search import finalize_solution, place_frame, shuffled

DEFAULT_SHELF_COUNT = 1
SLIDE_STEP = 2.0
MAX_SLIDES = 50
VARIETY_SHUFFLES = 3


def shelf_lines(wall_height: float, shelf_count: int) -> list[float]:
    """Y coordinates of the shelf lines, top to bottom."""
    band = wall_height / (shelf_count + 1)
    return [band * index for index in range(1, shelf_count + 1)]


def assign_to_shelves(
    frames: Sequence[InventoryItem], lines: Sequence[float]
) -> list[list[InventoryItem]]:
    """Distribute frames over shelves, balancing row widths.

    A shelf qualifies when the frame standing on it would not poke above the
    top of the wall. Among qualifying shelves the one with the smallest
    accumulated width wins (the first on ties); frames that fit nowhere go
    to the lowest shelf.
    """
    contents: list[list[InventoryItem]] = [[] for _ in lines]
    widths = [0.0] * len(lines)
    for item in frames:
        best = -1
        narrowest = math.inf
        for index, line in enumerate(lines):
            if line - item.height >= 0 and widths[index] < narrowest:
                narrowest = widths[index]
                best = index
        if best == -1:
            best = len(lines) - 1
        contents[best].append(item)
        widths[best] += item.width
    return contents


class SkylineGenerator(SearchingGenerator):
    """Multi-shelf strategy with balanced rows."""

    name = "skyline"
    desired_solutions = 4

    def _seeds(
        self, data: RecommenderInput, frames: Sequence[InventoryItem]
    ) -> Iterable[LayoutSolution]:
        yield self._build(data, sorted(frames, key=lambda f: f.height, reverse=True))
        for _ in range(VARIETY_SHUFFLES):
            yield self._build(data, shuffled(frames, self._rng))
        yield self._build(data, sorted(frames, key=lambda f: f.area, reverse=True))

    def _build(
        self, data: RecommenderInput, frames: Sequence[InventoryItem]
    ) -> LayoutSolution:
        config = data.config
        wall = data.wall
        usable = data.usable_bounds
        lines = shelf_lines(wall.height, config.shelf_count or DEFAULT_SHELF_COUNT)

        placed: list[PlacedFrame] = []
        for line, row in zip(lines, assign_to_shelves(frames, lines)):
            if not row:
                continue
            row_width = sum(item.width for item in row) + (len(row) - 1) * config.spacing
            x = (wall.width - row_width) / 2
            if row_width > wall.width - 2 * config.margin:
                x = config.margin

            for item in row:
                for _ in range(MAX_SLIDES):
                    candidate = Rect(x, line - item.height, item.width, item.height)
                    if is_within_bounds(candidate, usable) and not has_collision(
                        candidate, [*data.obstacles, *placed], config.spacing
                    ):
                        placed.append(place_frame(item, candidate.x, candidate.y))
                        x += item.width + config.spacing
                        break
                    x += SLIDE_STEP

        return finalize_solution(data, placed)


__all__ = [
    "SkylineGenerator",
    "assign_to_shelves",
    "shelf_lines",
]
