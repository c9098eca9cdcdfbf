"""Core geometry value objects: rectangles, walls and obstacles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in wall coordinates.

    The origin is the top-left corner of the wall and y grows downward.
    Zero-sized rectangles are allowed; they never overlap anything.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """X coordinate of the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Y coordinate of the bottom edge."""
        return self.y + self.height

    @property
    def area(self) -> float:
        """Area in square inches."""
        return self.width * self.height

    def inflate(self, amount: float) -> "Rect":
        """Grow the rectangle by ``amount`` on every side."""
        return Rect(
            x=self.x - amount,
            y=self.y - amount,
            width=self.width + 2 * amount,
            height=self.height + 2 * amount,
        )

    def contains(self, other: "Rect") -> bool:
        """Check whether ``other`` lies entirely inside this rectangle."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )


@dataclass(frozen=True)
class Wall:
    """The bounding rectangle frames are packed into, in inches."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Wall dimensions must be positive")

    @property
    def area(self) -> float:
        """Total wall area in square inches."""
        return self.width * self.height

    @property
    def center(self) -> tuple[float, float]:
        """Wall centre point as (x, y)."""
        return (self.width / 2, self.height / 2)

    def usable_bounds(self, margin: float) -> Rect:
        """Rectangle left after removing ``margin`` from every edge.

        Dimensions are clamped at zero when the margins overlap.
        """
        return Rect(
            x=margin,
            y=margin,
            width=max(0.0, self.width - 2 * margin),
            height=max(0.0, self.height - 2 * margin),
        )


@dataclass(frozen=True)
class Obstacle:
    """A fixed no-placement zone on the wall (window, outlet, existing frame).

    Attributes:
        x: Left edge from the wall's left side.
        y: Top edge from the wall's top side.
        width: Obstacle width.
        height: Obstacle height.
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Obstacle dimensions must be non-negative")

    @property
    def area(self) -> float:
        """Obstacle area in square inches."""
        return self.width * self.height

    def to_rect(self) -> Rect:
        """Convert to a plain rectangle."""
        return Rect(x=self.x, y=self.y, width=self.width, height=self.height)
