"""Domain services for frame layout.

This package provides the pure calculations the generators build on:
- Geometry kernel (intersection, bounds containment, gap-aware collision)
- Capacity heuristics (impossibility check, capacity estimate, thresholds)
- Layout metrics (coverage, alignment, balance)
"""

from .geometry import (
    RectLike,
    has_collision,
    intersects,
    is_within_bounds,
    round_half_up,
)
from .heuristics import (
    PACKING_EFFICIENCY,
    PASSING_RATIO,
    available_area,
    estimate_max_capacity,
    is_physically_impossible,
    passing_threshold,
)
from .metrics import (
    compute_metrics,
    mean_center_distance,
)

__all__ = [
    "PACKING_EFFICIENCY",
    "PASSING_RATIO",
    "RectLike",
    "available_area",
    "compute_metrics",
    "estimate_max_capacity",
    "has_collision",
    "intersects",
    "is_physically_impossible",
    "is_within_bounds",
    "mean_center_distance",
    "passing_threshold",
    "round_half_up",
]
