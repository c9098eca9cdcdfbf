"""Grid generator: centered rows packed left to right.

Frames are packed into rows no wider than the margin-reduced wall. Rows are
stacked while they fit the margin-reduced height, then the block is centered
on the wall: each row horizontally on its own width, the whole stack
vertically. Frames that end up out of bounds or too close to an obstacle
after centering are dropped, which can leave holes in the grid.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from gallerywall.domain.services import has_collision, is_within_bounds
from gallerywall.domain.value_objects import (
    InventoryItem,
    LayoutSolution,
    PlacedFrame,
    RecommenderInput,
)

from .base import SearchingGenerator
from .search import finalize_solution, place_frame


@dataclass
class _Row:
    """Frames sharing one horizontal row, in placement order."""

    items: list[InventoryItem] = field(default_factory=list)
    width: float = 0.0

    @property
    def height(self) -> float:
        return max((item.height for item in self.items), default=0.0)

    def fits(self, item: InventoryItem, max_width: float, spacing: float) -> bool:
        if not self.items:
            return item.width <= max_width
        return self.width + spacing + item.width <= max_width

    def add(self, item: InventoryItem, spacing: float) -> None:
        if self.items:
            self.width += spacing
        self.width += item.width
        self.items.append(item)


def _stack_height(rows: Sequence[_Row], spacing: float) -> float:
    if not rows:
        return 0.0
    return sum(row.height for row in rows) + spacing * (len(rows) - 1)


class GridGenerator(SearchingGenerator):
    """Row-packing strategy with a centered result."""

    name = "grid"
    desired_solutions = 10

    def _seeds(
        self, data: RecommenderInput, frames: Sequence[InventoryItem]
    ) -> Iterable[LayoutSolution]:
        yield self._build(data, sorted(frames, key=lambda f: f.height, reverse=True))
        yield self._build(data, sorted(frames, key=lambda f: f.area, reverse=True))
        yield self._build(data, sorted(frames, key=lambda f: f.height))

    def _pack_rows(
        self, data: RecommenderInput, frames: Sequence[InventoryItem]
    ) -> list[_Row]:
        spacing = data.config.spacing
        usable = data.usable_bounds
        rows: list[_Row] = []

        def fits_vertically(height: float) -> bool:
            gap = spacing if rows else 0.0
            return _stack_height(rows, spacing) + gap + height <= usable.height

        current = _Row()
        for item in frames:
            if current.fits(item, usable.width, spacing):
                current.add(item, spacing)
                continue

            if current.items:
                if not fits_vertically(current.height):
                    # Wall is full; the rest of this ordering is dropped.
                    return rows
                rows.append(current)
                current = _Row()

            if item.width > usable.width:
                continue
            if not fits_vertically(item.height):
                return rows
            current.add(item, spacing)

        if current.items and fits_vertically(current.height):
            rows.append(current)
        return rows

    def _build(
        self, data: RecommenderInput, frames: Sequence[InventoryItem]
    ) -> LayoutSolution:
        spacing = data.config.spacing
        wall = data.wall
        rows = self._pack_rows(data, frames)

        placed: list[PlacedFrame] = []
        y_cursor = (wall.height - _stack_height(rows, spacing)) / 2
        for row in rows:
            x_cursor = (wall.width - row.width) / 2
            for item in row.items:
                y_offset = (row.height - item.height) / 2
                placed.append(place_frame(item, x_cursor, y_cursor + y_offset))
                x_cursor += item.width + spacing
            y_cursor += row.height + spacing

        usable = data.usable_bounds
        valid = [
            frame
            for frame in placed
            if is_within_bounds(frame, usable)
            and not has_collision(frame, data.obstacles, spacing)
        ]
        return finalize_solution(data, valid)


__all__ = ["GridGenerator"]
