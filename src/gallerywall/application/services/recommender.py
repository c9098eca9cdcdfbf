"""Recommender orchestration service.

Turns one generation request into the ordered message stream callers
consume: zero or more ``SolutionFound`` messages followed by ``Done``, or a
single ``GenerationError``.
"""

from __future__ import annotations

import logging
from typing import Iterator

from gallerywall.application.generators.factory import GeneratorFactory
from gallerywall.application.generators.search import StopCheck
from gallerywall.contracts.messages import (
    Done,
    GenerationError,
    ResponseMessage,
    SolutionFound,
)
from gallerywall.domain.services import is_physically_impossible
from gallerywall.domain.value_objects import RecommenderInput

logger = logging.getLogger(__name__)

MAX_FORWARDED_SOLUTIONS = 10


class RecommenderService:
    """Runs a generator for a request and frames its output as messages.

    Fast paths skip generator work entirely:
    - empty inventory: ``Done(0)``
    - ``force_all`` on a request whose frames cannot fit by area: ``Done(0)``

    Otherwise the generator named by ``config.algorithm`` runs, up to
    ``MAX_FORWARDED_SOLUTIONS`` of its solutions are forwarded in the order
    it returned them, and ``Done`` reports the total it produced.

    This is the only place that turns an arbitrary exception into a
    structured ``GenerationError``.
    """

    def __init__(self, generator_factory: GeneratorFactory | None = None) -> None:
        """Initialize with a generator factory.

        Args:
            generator_factory: Creates generators by algorithm name. Defaults
                to a factory with production budgets and an unseeded RNG.
        """
        self._generator_factory = generator_factory or GeneratorFactory()

    def run_generation(
        self,
        data: RecommenderInput,
        should_stop: StopCheck | None = None,
    ) -> Iterator[ResponseMessage]:
        """Generate layouts for ``data`` and yield the response messages.

        Args:
            data: The generation request payload.
            should_stop: Optional cancellation check handed to the search.

        Yields:
            SolutionFound messages, then Done; or a single GenerationError.
        """
        if data.total_requested == 0:
            logger.info("Empty inventory, nothing to place")
            yield Done(count=0)
            return

        if data.config.force_all and is_physically_impossible(data):
            logger.warning(
                "force_all requested but the frames cannot fit the available "
                "wall area; skipping generation"
            )
            yield Done(count=0)
            return

        logger.info(
            f"Generating layouts with {data.config.algorithm!r} for "
            f"{data.total_requested} frames"
        )
        try:
            generator = self._generator_factory.create_generator(
                data.config.algorithm, should_stop=should_stop
            )
            solutions = generator.generate(data)
        except Exception as e:
            logger.exception("Layout generation failed")
            yield GenerationError(message=str(e) or type(e).__name__)
            return

        for solution in solutions[:MAX_FORWARDED_SOLUTIONS]:
            yield SolutionFound(payload=solution)
        logger.info(
            f"Generated {len(solutions)} solutions, forwarded "
            f"{min(len(solutions), MAX_FORWARDED_SOLUTIONS)}"
        )
        yield Done(count=len(solutions))

    def generate(
        self,
        data: RecommenderInput,
        should_stop: StopCheck | None = None,
    ) -> list[ResponseMessage]:
        """Collect the full message stream of ``run_generation`` into a list."""
        return list(self.run_generation(data, should_stop=should_stop))


__all__ = [
    "MAX_FORWARDED_SOLUTIONS",
    "RecommenderService",
]
