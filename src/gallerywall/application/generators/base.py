"""Base module for layout generators.

Re-exports the LayoutGenerator protocol and provides the shared
seed-then-search skeleton the concrete strategies build on.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Sequence

# Re-export the protocol for convenience
from gallerywall.contracts.strategies import LayoutGenerator
from gallerywall.domain.services import passing_threshold
from gallerywall.domain.value_objects import (
    InventoryItem,
    LayoutSolution,
    RecommenderInput,
)

from .search import RandomizedSearch, SearchBudget, StopCheck, shuffled

logger = logging.getLogger(__name__)


class SearchingGenerator:
    """Shared skeleton: deterministic seeds, then a randomized search.

    Subclasses implement ``_build`` (place one ordering of the expanded
    inventory) and optionally ``_seeds`` and ``_rank``. Everything else,
    including deduplication, budgets and cancellation, lives here.

    Attributes:
        name: Algorithm name used in log messages.
        desired_solutions: Satisfactory solutions to collect before stopping,
            unless the budget overrides it.
    """

    name = "base"
    desired_solutions = 4

    def __init__(
        self,
        budget: SearchBudget | None = None,
        rng: random.Random | None = None,
        should_stop: StopCheck | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            budget: Time and attempt limits. Defaults to 5 s / 100 000 attempts.
            rng: Random source for shuffles and random positions. A seeded
                instance makes ``generate`` reproducible.
            should_stop: Optional cancellation check polled by the search loop.
        """
        self._budget = budget or SearchBudget()
        self._rng = rng or random.Random()
        self._should_stop = should_stop

    def generate(self, data: RecommenderInput) -> list[LayoutSolution]:
        """Produce unique, non-empty layouts for ``data``.

        Args:
            data: Wall, inventory, obstacles and placement config.

        Returns:
            Accepted solutions, ordered by ``_rank``.
        """
        frames = data.expanded_inventory()
        if not frames:
            return []

        desired = self._budget.desired_solutions or self.desired_solutions
        search = RandomizedSearch(
            self._budget,
            threshold=passing_threshold(data),
            desired=desired,
            should_stop=self._should_stop,
        )
        solutions = search.run(
            self._seeds(data, frames),
            lambda: self._build(data, shuffled(frames, self._rng)),
        )
        logger.info(
            f"{self.name} generator produced {len(solutions)} solutions "
            f"in {search.attempts} randomized attempts"
        )
        return self._rank(data, solutions)

    def _seeds(
        self, data: RecommenderInput, frames: Sequence[InventoryItem]
    ) -> Iterable[LayoutSolution]:
        """Deterministic starting layouts. None by default."""
        return ()

    def _build(
        self, data: RecommenderInput, frames: Sequence[InventoryItem]
    ) -> LayoutSolution:
        raise NotImplementedError

    def _rank(
        self, data: RecommenderInput, solutions: list[LayoutSolution]
    ) -> list[LayoutSolution]:
        """Order the accepted solutions. Insertion order by default."""
        return solutions


__all__ = [
    "LayoutGenerator",
    "SearchingGenerator",
]
