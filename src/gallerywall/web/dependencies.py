"""FastAPI dependency injection for recommender services."""

from typing import Annotated, Callable

from fastapi import Depends

from gallerywall.application.config import (
    RecommenderConfiguration,
    config_to_budget,
    config_to_rng,
)
from gallerywall.application.generators import GeneratorFactory
from gallerywall.application.services import RecommenderService

ServiceBuilder = Callable[[RecommenderConfiguration], RecommenderService]


def build_recommender_service(config: RecommenderConfiguration) -> RecommenderService:
    """Create a RecommenderService using the request's search settings."""
    return RecommenderService(
        GeneratorFactory(budget=config_to_budget(config), rng=config_to_rng(config))
    )


def get_service_builder() -> ServiceBuilder:
    """Dependency for the per-request RecommenderService builder."""
    return build_recommender_service


# Type aliases for cleaner endpoint signatures
ServiceBuilderDep = Annotated[ServiceBuilder, Depends(get_service_builder)]
