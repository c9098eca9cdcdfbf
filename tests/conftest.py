"""Pytest configuration and shared fixtures for gallery wall tests."""

from __future__ import annotations

import random

import pytest

from gallerywall.application.generators import SearchBudget
from gallerywall.domain.services import has_collision, is_within_bounds
from gallerywall.domain.value_objects import (
    InventoryItem,
    LayoutSolution,
    Obstacle,
    RecommenderConfig,
    RecommenderInput,
    Wall,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Search settings
# =============================================================================


@pytest.fixture
def small_budget() -> SearchBudget:
    """A budget small enough to keep generator tests fast."""
    return SearchBudget(time_limit=2.0, max_attempts=30)


@pytest.fixture
def rng() -> random.Random:
    """A seeded random source for reproducible layouts."""
    return random.Random(1234)


# =============================================================================
# Requests
# =============================================================================


def make_input(
    wall: tuple[float, float] = (200.0, 100.0),
    frames: list[tuple[str, float, float, int]] | None = None,
    obstacles: list[tuple[float, float, float, float]] | None = None,
    **config: object,
) -> RecommenderInput:
    """Build a RecommenderInput from plain tuples.

    Args:
        wall: (width, height) of the wall.
        frames: (id, width, height, count) per inventory item.
        obstacles: (x, y, width, height) per obstacle.
        **config: RecommenderConfig fields.
    """
    return RecommenderInput(
        wall=Wall(*wall),
        inventory=tuple(InventoryItem(*frame) for frame in frames or []),
        obstacles=tuple(Obstacle(*obstacle) for obstacle in obstacles or []),
        config=RecommenderConfig(**config),  # type: ignore[arg-type]
    )


@pytest.fixture
def make_request():
    """Factory fixture wrapping ``make_input``."""
    return make_input


@pytest.fixture
def grid_request() -> RecommenderInput:
    """Six 20x20 frames on a roomy 200x100 wall."""
    return make_input(
        frames=[("A", 20.0, 20.0, 2), ("B", 20.0, 20.0, 2), ("C", 20.0, 20.0, 2)],
        spacing=2.0,
        margin=5.0,
        algorithm="grid",
    )


@pytest.fixture
def mixed_request() -> RecommenderInput:
    """A mixed inventory with one obstacle on a 120x80 wall."""
    return make_input(
        wall=(120.0, 80.0),
        frames=[
            ("portrait", 12.0, 18.0, 2),
            ("landscape", 18.0, 12.0, 2),
            ("square", 10.0, 10.0, 3),
        ],
        obstacles=[(50.0, 30.0, 20.0, 20.0)],
        spacing=2.0,
        margin=4.0,
    )


# =============================================================================
# Layout checks
# =============================================================================

# Allowance for floating point noise after a layout is translated.
GEOMETRY_TOLERANCE = 1e-6


def assert_valid_layout(solution: LayoutSolution, data: RecommenderInput) -> None:
    """Assert a solution is in bounds, clear of obstacles and well spaced."""
    bounds = data.usable_bounds.inflate(GEOMETRY_TOLERANCE)
    gap = max(0.0, data.config.spacing - GEOMETRY_TOLERANCE)
    assert not solution.is_empty
    assert solution.score == len(solution.frames)
    for index, frame in enumerate(solution.frames):
        assert is_within_bounds(frame, bounds), f"{frame} out of bounds"
        assert not has_collision(frame, data.obstacles, gap), f"{frame} hits obstacle"
        others = solution.frames[index + 1 :]
        assert not has_collision(frame, others, gap), f"{frame} too close to a frame"


@pytest.fixture
def check_layout():
    """Fixture exposing ``assert_valid_layout``."""
    return assert_valid_layout
