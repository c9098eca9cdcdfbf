"""Time-boxed randomized search with signature deduplication.

All five generators share the same outer loop: take a few deterministic
seed layouts, then keep producing randomized layouts until enough
satisfactory ones are found or the budget runs out. Duplicates (same
signature) are dropped along the way.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Iterable, Sequence

from gallerywall.domain.services import compute_metrics, round_half_up
from gallerywall.domain.value_objects import (
    InventoryItem,
    LayoutSolution,
    PlacedFrame,
    RecommenderInput,
    new_id,
)

logger = logging.getLogger(__name__)

DEFAULT_TIME_LIMIT = 5.0
DEFAULT_MAX_ATTEMPTS = 100_000

# Frames whose rounded tops differ by at most this much share a signature row.
ROW_TOLERANCE = 1

StopCheck = Callable[[], bool]


@dataclass(frozen=True)
class SearchBudget:
    """Limits for the randomized search loop.

    Attributes:
        time_limit: Wall-clock budget in seconds.
        max_attempts: Hard cap on randomized attempts.
        desired_solutions: Satisfactory solutions to collect before stopping.
            None lets each generator use its own default.
    """

    time_limit: float = DEFAULT_TIME_LIMIT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    desired_solutions: int | None = None

    def __post_init__(self) -> None:
        if self.time_limit <= 0:
            raise ValueError("Time limit must be positive")
        if self.max_attempts < 0:
            raise ValueError("Max attempts must be non-negative")
        if self.desired_solutions is not None and self.desired_solutions < 1:
            raise ValueError("Desired solutions must be at least 1")


def _row_major(a: PlacedFrame, b: PlacedFrame) -> int:
    dy = round_half_up(a.y) - round_half_up(b.y)
    if abs(dy) > ROW_TOLERANCE:
        return dy
    return round_half_up(a.x) - round_half_up(b.x)


def solution_signature(frames: Sequence[PlacedFrame]) -> str:
    """Canonical key for a layout's visual arrangement.

    Frames are ordered row-major (rounded y, then rounded x, tolerating about
    one unit of vertical jitter) and encoded as ``"x,y,w,h"`` tuples joined
    with ``|``, every value rounded to the nearest integer.
    """
    ordered = sorted(frames, key=cmp_to_key(_row_major))
    return "|".join(
        f"{round_half_up(f.x)},{round_half_up(f.y)},"
        f"{round_half_up(f.width)},{round_half_up(f.height)}"
        for f in ordered
    )


def place_frame(
    item: InventoryItem,
    x: float,
    y: float,
    rotation: int = 0,
) -> PlacedFrame:
    """Create a fresh placement of ``item`` at (x, y).

    With ``rotation=90`` the item's width and height are swapped.
    """
    width, height = item.width, item.height
    if rotation == 90:
        width, height = height, width
    return PlacedFrame(
        id=new_id(),
        library_id=item.id,
        x=x,
        y=y,
        width=width,
        height=height,
        rotation=rotation,
    )


def finalize_solution(
    data: RecommenderInput,
    frames: Iterable[PlacedFrame],
) -> LayoutSolution:
    """Turn a list of placements into a solution.

    Placements with non-finite coordinates are dropped. Under ``force_all`` a
    layout that misses any requested copy is discarded and an empty solution
    returned instead.
    """
    placed = tuple(frame for frame in frames if frame.is_finite)
    if not placed:
        return LayoutSolution.empty()
    if data.config.force_all and len(placed) < data.total_requested:
        return LayoutSolution.empty()
    return LayoutSolution(
        id=new_id(),
        frames=placed,
        score=len(placed),
        metrics=compute_metrics(placed, data),
    )


def shuffled(items: Sequence[InventoryItem], rng: random.Random) -> list[InventoryItem]:
    """Return a shuffled copy of ``items``."""
    result = list(items)
    rng.shuffle(result)
    return result


class RandomizedSearch:
    """Collects unique solutions under a time and attempt budget.

    The loop stops as soon as any of these holds:
    - ``desired`` satisfactory solutions have been accepted
    - ``budget.time_limit`` seconds have elapsed
    - ``budget.max_attempts`` randomized attempts were made
    - ``should_stop()`` returns True

    Example:
        ```python
        search = RandomizedSearch(budget, threshold=5, desired=4)
        solutions = search.run(seeds, lambda: build(shuffled(frames, rng)))
        ```
    """

    def __init__(
        self,
        budget: SearchBudget,
        threshold: int,
        desired: int,
        clock: Callable[[], float] = time.monotonic,
        should_stop: StopCheck | None = None,
    ) -> None:
        """Initialize the search.

        Args:
            budget: Time and attempt limits.
            threshold: Frame count at which a solution counts as satisfactory.
            desired: Satisfactory solutions to collect before stopping early.
            clock: Monotonic clock in seconds, replaceable in tests.
            should_stop: Optional cancellation check polled every iteration.
        """
        self._budget = budget
        self._threshold = threshold
        self._desired = desired
        self._clock = clock
        self._should_stop = should_stop
        self._signatures: set[str] = set()
        self._solutions: list[LayoutSolution] = []
        self._satisfactory = 0
        self.attempts = 0

    @property
    def satisfactory_count(self) -> int:
        return self._satisfactory

    def offer(self, solution: LayoutSolution) -> bool:
        """Accept ``solution`` unless it is empty or a duplicate.

        Returns:
            True if the solution was kept.
        """
        if solution.is_empty:
            return False
        signature = solution_signature(solution.frames)
        if signature in self._signatures:
            return False
        self._signatures.add(signature)
        self._solutions.append(solution)
        if solution.frame_count >= self._threshold:
            self._satisfactory += 1
        return True

    def _exhausted(self, started: float) -> bool:
        if self._satisfactory >= self._desired:
            return True
        if self._clock() - started >= self._budget.time_limit:
            return True
        if self.attempts >= self._budget.max_attempts:
            return True
        return self._should_stop is not None and self._should_stop()

    def run(
        self,
        seeds: Iterable[LayoutSolution],
        attempt: Callable[[], LayoutSolution],
    ) -> list[LayoutSolution]:
        """Offer the seeds, then search until the budget is exhausted.

        Args:
            seeds: Deterministic solutions, offered first and deduplicated
                like any other.
            attempt: Builds one randomized candidate per call.

        Returns:
            Every accepted solution in acceptance order.
        """
        started = self._clock()
        for seed in seeds:
            self.offer(seed)

        while not self._exhausted(started):
            self.attempts += 1
            self.offer(attempt())

        logger.debug(
            f"Search finished: {len(self._solutions)} solutions "
            f"({self._satisfactory} satisfactory, threshold {self._threshold}) "
            f"after {self.attempts} attempts"
        )
        return list(self._solutions)
