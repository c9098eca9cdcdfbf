"""Layout value objects: placed frames and candidate solutions."""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, replace
from typing import Any

VALID_ROTATIONS: frozenset[int] = frozenset({0, 90})


def new_id() -> str:
    """Generate a fresh identifier for a placement or solution."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class PlacedFrame:
    """A concrete placement of one inventory copy on the wall.

    Attributes:
        id: Fresh identifier for this placement.
        library_id: Identifier of the originating inventory item.
        x: Left edge from the wall's left side.
        y: Top edge from the wall's top side.
        width: Placed width (swapped when rotated).
        height: Placed height (swapped when rotated).
        rotation: 0 or 90, recording whether width and height were swapped.
    """

    id: str
    library_id: str
    x: float
    y: float
    width: float
    height: float
    rotation: int = 0

    def __post_init__(self) -> None:
        if self.rotation not in VALID_ROTATIONS:
            raise ValueError("Rotation must be 0 or 90 degrees")

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def is_finite(self) -> bool:
        """True when every coordinate and dimension is a finite number."""
        return all(
            math.isfinite(value) for value in (self.x, self.y, self.width, self.height)
        )

    def translated(self, dx: float, dy: float) -> "PlacedFrame":
        """Return the same placement moved by (dx, dy)."""
        return replace(self, x=self.x + dx, y=self.y + dy)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "libraryId": self.library_id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "rotation": self.rotation,
        }


@dataclass(frozen=True)
class LayoutMetrics:
    """Descriptive quality measures of a solution, each in [0, 1].

    Attributes:
        coverage: Placed frame area over the available wall area.
        alignment: Share of frames lining up with another frame's left or top edge.
        balance: How close the visual centre of mass sits to the wall centre.
    """

    coverage: float = 0.0
    alignment: float = 0.0
    balance: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {
            "coverage": self.coverage,
            "alignment": self.alignment,
            "balance": self.balance,
        }


@dataclass(frozen=True)
class LayoutSolution:
    """One complete candidate arrangement.

    ``score`` is the number of frames placed; higher is better.
    """

    id: str
    frames: tuple[PlacedFrame, ...]
    score: int
    metrics: LayoutMetrics | None = None

    def __post_init__(self) -> None:
        if self.score < 0:
            raise ValueError("Score must be non-negative")

    @classmethod
    def empty(cls) -> "LayoutSolution":
        """A discarded candidate: no frames, score 0."""
        return cls(id=new_id(), frames=(), score=0)

    @property
    def is_empty(self) -> bool:
        return not self.frames

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "frames": [frame.to_dict() for frame in self.frames],
            "score": self.score,
        }
        if self.metrics is not None:
            data["metadata"] = self.metrics.to_dict()
        return data
