"""Inventory value objects: the frames a user wants placed."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InventoryItem:
    """A frame template and how many copies of it are requested.

    Attributes:
        id: Library identifier, carried onto every placement as ``library_id``.
        width: Frame width in inches.
        height: Frame height in inches.
        count: Number of copies to place.
    """

    id: str
    width: float
    height: float
    count: int = 1

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Frame dimensions must be positive")
        if self.count < 0:
            raise ValueError("Frame count must be non-negative")

    @property
    def area(self) -> float:
        """Area of a single copy in square inches."""
        return self.width * self.height

    @property
    def total_area(self) -> float:
        """Area of all requested copies in square inches."""
        return self.area * self.count


def expand_inventory(inventory: tuple[InventoryItem, ...] | list[InventoryItem]) -> list[InventoryItem]:
    """Repeat every item ``count`` times so each copy can be placed individually."""
    expanded: list[InventoryItem] = []
    for item in inventory:
        expanded.extend([item] * item.count)
    return expanded
