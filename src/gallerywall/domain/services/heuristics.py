"""Capacity heuristics for generation requests.

These are cheap area-based estimates. They never place anything; they only
tell the generators how many frames are worth aiming for and tell the
orchestrator when a ``force_all`` request cannot possibly succeed.
"""

from __future__ import annotations

import math

from ..value_objects import RecommenderInput

__all__ = [
    "PACKING_EFFICIENCY",
    "PASSING_RATIO",
    "available_area",
    "estimate_max_capacity",
    "is_physically_impossible",
    "passing_threshold",
]

# Share of the free area rectangles can realistically cover.
PACKING_EFFICIENCY = 0.85

# Share of the requested frames a solution must place to count as satisfactory.
PASSING_RATIO = 0.9


def available_area(data: RecommenderInput) -> float:
    """Margin-reduced wall area minus the area of all obstacles.

    Each wall axis is clamped at zero before multiplying, and the result is
    never negative.
    """
    usable = data.usable_bounds
    obstacle_area = sum(obstacle.area for obstacle in data.obstacles)
    return max(0.0, usable.area - obstacle_area)


def is_physically_impossible(data: RecommenderInput) -> bool:
    """Check whether the raw frame area exceeds the available wall area.

    This is a necessary condition for failure, not a sufficient one: a
    request that passes may still be unpackable.

    Args:
        data: The generation request.

    Returns:
        True if the summed ``width * height * count`` of the inventory is
        strictly larger than ``available_area(data)``.
    """
    requested = sum(item.total_area for item in data.inventory)
    return requested > available_area(data)


def estimate_max_capacity(data: RecommenderInput) -> int:
    """Estimate how many of the requested frames could fit at best.

    The available area is scaled by ``PACKING_EFFICIENCY``. Frames are then
    taken smallest first, each occupying ``(width + spacing) * (height +
    spacing)``, until the next one would overflow the scaled area.

    Args:
        data: The generation request.

    Returns:
        An optimistic frame count, never larger than the total requested.
    """
    spacing = data.config.spacing
    limit = available_area(data) * PACKING_EFFICIENCY

    used = 0.0
    count = 0
    for item in sorted(data.expanded_inventory(), key=lambda item: item.area):
        footprint = (item.width + spacing) * (item.height + spacing)
        if used + footprint > limit:
            break
        used += footprint
        count += 1
    return count


def passing_threshold(data: RecommenderInput) -> int:
    """Frame count a solution needs to count toward the search's target.

    Under ``force_all`` this is the total requested count. Otherwise it is 90%
    of the request, capped by ``estimate_max_capacity`` and never below one.
    """
    total = data.total_requested
    if data.config.force_all:
        return total
    return max(1, min(math.floor(total * PASSING_RATIO), estimate_max_capacity(data)))
