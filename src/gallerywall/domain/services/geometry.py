"""Geometry kernel for frame placement.

Pure functions over axis-aligned rectangles. Anything exposing ``x``, ``y``,
``width`` and ``height`` attributes can be passed in: ``Rect``, ``Obstacle``
and ``PlacedFrame`` all qualify.
"""

from __future__ import annotations

import math
from typing import Iterable, Protocol

__all__ = [
    "RectLike",
    "has_collision",
    "intersects",
    "is_within_bounds",
    "round_half_up",
]


class RectLike(Protocol):
    """Structural type for anything with a position and a size."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always going up.

    Layout comparisons use this instead of ``round`` so that an edge at 2.5
    and one at 3.4 land on the same grid line.
    """
    return math.floor(value + 0.5)


def _overlaps(
    ax: float, ay: float, aw: float, ah: float,
    bx: float, by: float, bw: float, bh: float,
) -> bool:
    overlap_x = min(ax + aw, bx + bw) - max(ax, bx)
    overlap_y = min(ay + ah, by + bh) - max(ay, by)
    return overlap_x > 0 and overlap_y > 0


def intersects(a: RectLike, b: RectLike) -> bool:
    """Check whether two rectangles overlap with positive area.

    Rectangles that only share an edge or a corner do not intersect, and a
    rectangle with zero width or height never intersects anything.

    Args:
        a: First rectangle.
        b: Second rectangle.

    Returns:
        True if the interiors of ``a`` and ``b`` overlap.
    """
    return _overlaps(a.x, a.y, a.width, a.height, b.x, b.y, b.width, b.height)


def is_within_bounds(rect: RectLike, bounds: RectLike) -> bool:
    """Check whether ``rect`` lies entirely inside ``bounds``.

    Touching the boundary counts as inside.
    """
    return (
        rect.x >= bounds.x
        and rect.y >= bounds.y
        and rect.x + rect.width <= bounds.x + bounds.width
        and rect.y + rect.height <= bounds.y + bounds.height
    )


def has_collision(
    candidate: RectLike,
    others: Iterable[RectLike],
    gap: float,
) -> bool:
    """Check whether ``candidate`` comes closer than ``gap`` to any other rect.

    Both the candidate and every entry of ``others`` are inflated by
    ``gap / 2`` on every side before the intersection test. Two rectangles
    separated by at least ``gap`` along either axis therefore never collide.

    Args:
        candidate: The rectangle being placed.
        others: Obstacles and frames already placed in the partial solution.
        gap: Required clearance between ``candidate`` and each other rect.

    Returns:
        True if any inflated pair intersects.
    """
    half = gap / 2
    cx = candidate.x - half
    cy = candidate.y - half
    cw = candidate.width + gap
    ch = candidate.height + gap
    for other in others:
        if _overlaps(
            cx, cy, cw, ch,
            other.x - half, other.y - half, other.width + gap, other.height + gap,
        ):
            return True
    return False
