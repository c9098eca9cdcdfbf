"""Masonry generator: free-rectangle packing.

The margin-reduced wall starts as a single free rectangle. Obstacles,
inflated by the spacing, are cut out first. Each frame goes into the free
rectangle that is top-most, then left-most, among those large enough to
hold it. Its footprint, inflated by the spacing on every side, is then cut
from every free rectangle it touches, and residual rectangles contained in
another are pruned.

When the packed block is finished it is centered on the wall. If the
centered block would put any frame too close to an obstacle, the
uncentered placement is kept instead.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from gallerywall.domain.services import has_collision, intersects, is_within_bounds
from gallerywall.domain.value_objects import (
    InventoryItem,
    LayoutSolution,
    PlacedFrame,
    RecommenderInput,
    Rect,
)

from .base import SearchingGenerator
from .search import finalize_solution, place_frame

# Fraction of the spacing used for the placement sanity check, so frames
# sitting exactly on a cut edge are not rejected by rounding noise.
SAFETY_GAP_RATIO = 0.9


def _split(rect: Rect, cut: Rect) -> list[Rect]:
    """Residual pieces of ``rect`` around ``cut`` (top, bottom, left, right)."""
    pieces: list[Rect] = []
    if cut.y > rect.y:
        pieces.append(Rect(rect.x, rect.y, rect.width, cut.y - rect.y))
    if cut.bottom < rect.bottom:
        pieces.append(Rect(rect.x, cut.bottom, rect.width, rect.bottom - cut.bottom))
    if cut.x > rect.x:
        pieces.append(Rect(rect.x, rect.y, cut.x - rect.x, rect.height))
    if cut.right < rect.right:
        pieces.append(Rect(cut.right, rect.y, rect.right - cut.right, rect.height))
    return pieces


def prune_free_rects(rects: Sequence[Rect]) -> list[Rect]:
    """Drop rectangles contained in another one.

    Of several identical rectangles only the first is kept.
    """
    kept: list[Rect] = []
    for index, rect in enumerate(rects):
        redundant = any(
            other_index != index
            and other.contains(rect)
            and (other != rect or other_index < index)
            for other_index, other in enumerate(rects)
        )
        if not redundant:
            kept.append(rect)
    return kept


def cut_free_rects(free: Sequence[Rect], cut: Rect) -> list[Rect]:
    """Rebuild the free list with ``cut`` removed from it."""
    rebuilt: list[Rect] = []
    for rect in free:
        if intersects(cut, rect):
            rebuilt.extend(_split(rect, cut))
        else:
            rebuilt.append(rect)
    return prune_free_rects(rebuilt)


def _best_fit(free: Sequence[Rect], item: InventoryItem) -> Rect | None:
    candidates = [
        rect for rect in free if rect.width >= item.width and rect.height >= item.height
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda rect: (rect.y, rect.x))


class MasonryGenerator(SearchingGenerator):
    """Free-rectangle packing strategy with block centering."""

    name = "masonry"
    desired_solutions = 10

    def _seeds(
        self, data: RecommenderInput, frames: Sequence[InventoryItem]
    ) -> Iterable[LayoutSolution]:
        yield self._build(data, sorted(frames, key=lambda f: f.height, reverse=True))
        yield self._build(data, sorted(frames, key=lambda f: f.area, reverse=True))
        yield self._build(data, sorted(frames, key=lambda f: f.width, reverse=True))
        yield self._build(
            data, sorted(frames, key=lambda f: max(f.width, f.height), reverse=True)
        )

    def _pack(
        self, data: RecommenderInput, frames: Sequence[InventoryItem]
    ) -> list[PlacedFrame]:
        spacing = data.config.spacing
        obstacles = data.obstacles

        free = [data.usable_bounds]
        for obstacle in obstacles:
            free = cut_free_rects(free, obstacle.to_rect().inflate(spacing))

        placed: list[PlacedFrame] = []
        for item in frames:
            target = _best_fit(free, item)
            if target is None:
                continue
            frame = place_frame(item, target.x, target.y)
            if has_collision(frame, [*obstacles, *placed], spacing * SAFETY_GAP_RATIO):
                continue
            placed.append(frame)
            footprint = Rect(frame.x, frame.y, frame.width, frame.height)
            free = cut_free_rects(free, footprint.inflate(spacing))
        return placed

    def _center(
        self, data: RecommenderInput, placed: list[PlacedFrame]
    ) -> list[PlacedFrame]:
        if not placed:
            return placed
        min_x = min(frame.x for frame in placed)
        min_y = min(frame.y for frame in placed)
        max_x = max(frame.right for frame in placed)
        max_y = max(frame.bottom for frame in placed)
        dx = (data.wall.width - (max_x - min_x)) / 2 - min_x
        dy = (data.wall.height - (max_y - min_y)) / 2 - min_y

        centered = [frame.translated(dx, dy) for frame in placed]
        if all(self._is_clear(data, frame) for frame in centered):
            return centered
        return placed

    @staticmethod
    def _is_clear(data: RecommenderInput, frame: PlacedFrame) -> bool:
        return is_within_bounds(frame, data.usable_bounds) and not has_collision(
            frame, data.obstacles, data.config.spacing
        )

    def _build(
        self, data: RecommenderInput, frames: Sequence[InventoryItem]
    ) -> LayoutSolution:
        placed = self._center(data, self._pack(data, frames))
        return finalize_solution(
            data, [frame for frame in placed if self._is_clear(data, frame)]
        )


__all__ = [
    "MasonryGenerator",
    "cut_free_rects",
    "prune_free_rects",
]
