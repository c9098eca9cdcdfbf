"""Generation request value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ._geometry import Obstacle, Rect, Wall
from ._inventory import InventoryItem, expand_inventory


class LayoutAlgorithm(str, Enum):
    """Packing strategies available to the recommender.

    Attributes:
        GRID: Centered rows packed left to right.
        MASONRY: Free-rectangle packing, top-most then left-most.
        MONTE_CARLO: Random positions with retries.
        SPIRAL: Outward Archimedean spiral from the wall centre.
        SKYLINE: Frames standing on evenly spaced horizontal shelves.
    """

    GRID = "grid"
    MASONRY = "masonry"
    MONTE_CARLO = "monte_carlo"
    SPIRAL = "spiral"
    SKYLINE = "skyline"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


@dataclass(frozen=True)
class RecommenderConfig:
    """Placement constraints for one generation request.

    Attributes:
        spacing: Minimum gap between any two frames and between a frame and
            an obstacle.
        margin: Minimum gap between a frame and the wall edges.
        algorithm: Strategy name; unknown names fall back to monte_carlo.
        force_all: When True a solution must place every requested copy.
        shelf_count: Number of shelves for the skyline strategy.
    """

    spacing: float = 2.0
    margin: float = 5.0
    algorithm: str = LayoutAlgorithm.MONTE_CARLO.value
    force_all: bool = False
    shelf_count: int | None = None

    def __post_init__(self) -> None:
        if self.spacing < 0:
            raise ValueError("Spacing must be non-negative")
        if self.margin < 0:
            raise ValueError("Margin must be non-negative")
        if self.shelf_count is not None and self.shelf_count < 1:
            raise ValueError("Shelf count must be at least 1")


@dataclass(frozen=True)
class RecommenderInput:
    """Everything a generator needs: wall, inventory, obstacles and config.

    Built once per request and never mutated afterwards.
    """

    wall: Wall
    inventory: tuple[InventoryItem, ...] = ()
    obstacles: tuple[Obstacle, ...] = ()
    config: RecommenderConfig = field(default_factory=RecommenderConfig)

    @property
    def total_requested(self) -> int:
        """Sum of all inventory counts."""
        return sum(item.count for item in self.inventory)

    @property
    def usable_bounds(self) -> Rect:
        """The wall rectangle reduced by the configured margin."""
        return self.wall.usable_bounds(self.config.margin)

    def expanded_inventory(self) -> list[InventoryItem]:
        """One entry per requested copy, in inventory order."""
        return expand_inventory(self.inventory)
