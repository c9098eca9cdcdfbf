"""Value objects for the gallery wall domain.

This module provides immutable data types used throughout the layout
recommender. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Geometry
from ._geometry import (
    Obstacle,
    Rect,
    Wall,
)

# Inventory
from ._inventory import (
    InventoryItem,
    expand_inventory,
)

# Placements and solutions
from ._layout import (
    VALID_ROTATIONS,
    LayoutMetrics,
    LayoutSolution,
    PlacedFrame,
    new_id,
)

# Requests
from ._request import (
    LayoutAlgorithm,
    RecommenderConfig,
    RecommenderInput,
)

__all__ = [
    "InventoryItem",
    "LayoutAlgorithm",
    "LayoutMetrics",
    "LayoutSolution",
    "Obstacle",
    "PlacedFrame",
    "Rect",
    "RecommenderConfig",
    "RecommenderInput",
    "VALID_ROTATIONS",
    "Wall",
    "expand_inventory",
    "new_id",
]
