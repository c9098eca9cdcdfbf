"""Factory for creating layout generators.

The GeneratorFactory keeps the name-to-strategy mapping in one place so the
orchestrator stays open for new strategies without modification.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from gallerywall.domain.value_objects import LayoutAlgorithm

from .base import SearchingGenerator
from .grid import GridGenerator
from .masonry import MasonryGenerator
from .monte_carlo import MonteCarloGenerator
from .search import SearchBudget, StopCheck
from .skyline import SkylineGenerator
from .spiral import SpiralGenerator

if TYPE_CHECKING:
    from gallerywall.contracts.strategies import LayoutGenerator

logger = logging.getLogger(__name__)

GENERATORS: dict[LayoutAlgorithm, type[SearchingGenerator]] = {
    LayoutAlgorithm.GRID: GridGenerator,
    LayoutAlgorithm.MASONRY: MasonryGenerator,
    LayoutAlgorithm.MONTE_CARLO: MonteCarloGenerator,
    LayoutAlgorithm.SPIRAL: SpiralGenerator,
    LayoutAlgorithm.SKYLINE: SkylineGenerator,
}

FALLBACK_ALGORITHM = LayoutAlgorithm.MONTE_CARLO


def resolve_algorithm(name: str | LayoutAlgorithm) -> LayoutAlgorithm:
    """Map an algorithm name to a known strategy.

    Unrecognised names resolve to Monte-Carlo.
    """
    try:
        return LayoutAlgorithm(name)
    except ValueError:
        logger.warning(
            f"Unknown algorithm {name!r}, falling back to {FALLBACK_ALGORITHM.value}"
        )
        return FALLBACK_ALGORITHM


class GeneratorFactory:
    """Factory for creating layout generator instances.

    Every generator it creates shares the factory's search budget and random
    source.

    Example:
        ```python
        factory = GeneratorFactory(SearchBudget(time_limit=1.0), random.Random(7))
        generator = factory.create_generator("masonry")
        solutions = generator.generate(data)
        ```
    """

    def __init__(
        self,
        budget: SearchBudget | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize with shared search settings.

        Args:
            budget: Time and attempt limits handed to every generator.
            rng: Random source handed to every generator.
        """
        self._budget = budget
        self._rng = rng

    def create_generator(
        self,
        algorithm: str | LayoutAlgorithm,
        should_stop: StopCheck | None = None,
    ) -> "LayoutGenerator":
        """Create the generator registered for ``algorithm``.

        Args:
            algorithm: Strategy name; unknown names fall back to Monte-Carlo.
            should_stop: Optional cancellation check for the search loop.

        Returns:
            A LayoutGenerator instance.
        """
        generator_class = GENERATORS[resolve_algorithm(algorithm)]
        return generator_class(
            budget=self._budget,
            rng=self._rng,
            should_stop=should_stop,
        )


__all__ = [
    "FALLBACK_ALGORITHM",
    "GENERATORS",
    "GeneratorFactory",
    "resolve_algorithm",
]
