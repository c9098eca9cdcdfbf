"""Adapters from request schemas to domain objects.

The schema layer describes what a user typed; these functions build the
immutable domain objects and search settings the generators consume.
"""

import random

from gallerywall.application.config.schema import RecommenderConfiguration
from gallerywall.application.generators.search import SearchBudget
from gallerywall.domain.value_objects import (
    InventoryItem,
    Obstacle,
    RecommenderConfig,
    RecommenderInput,
    Wall,
)


def config_to_input(config: RecommenderConfiguration) -> RecommenderInput:
    """Build the generator input from a validated request.

    Args:
        config: A validated RecommenderConfiguration.

    Returns:
        RecommenderInput with wall, inventory, obstacles and placement config.
    """
    layout = config.config
    return RecommenderInput(
        wall=Wall(width=config.wall.width, height=config.wall.height),
        inventory=tuple(
            InventoryItem(
                id=frame.id,
                width=frame.width,
                height=frame.height,
                count=frame.count,
            )
            for frame in config.inventory
        ),
        obstacles=tuple(
            Obstacle(x=ob.x, y=ob.y, width=ob.width, height=ob.height)
            for ob in config.obstacles
        ),
        config=RecommenderConfig(
            spacing=layout.spacing,
            margin=layout.margin,
            algorithm=layout.algorithm,
            force_all=layout.force_all,
            shelf_count=layout.shelf_count,
        ),
    )


def config_to_budget(config: RecommenderConfiguration) -> SearchBudget:
    """Search limits for the request, production defaults when omitted."""
    if config.search is None:
        return SearchBudget()
    return SearchBudget(
        time_limit=config.search.time_limit,
        max_attempts=config.search.max_attempts,
        desired_solutions=config.search.desired_solutions,
    )


def config_to_rng(config: RecommenderConfiguration) -> random.Random | None:
    """A seeded random source if the request names a seed, else None."""
    if config.search is None or config.search.seed is None:
        return None
    return random.Random(config.search.seed)


__all__ = [
    "config_to_budget",
    "config_to_input",
    "config_to_rng",
]
