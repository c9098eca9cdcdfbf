"""Strategy protocol for layout generation.

Every packing strategy implements the same single-method contract, so the
orchestrator can pick one by name at runtime without knowing which
concrete class it talks to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gallerywall.domain.value_objects import LayoutSolution, RecommenderInput


@runtime_checkable
class LayoutGenerator(Protocol):
    """Protocol for frame layout generation strategies.

    Implementations:
    - GridGenerator: centered rows packed left to right
    - MasonryGenerator: free-rectangle packing, top-most then left-most
    - MonteCarloGenerator: random positions with retries, best first
    - SpiralGenerator: outward spiral from the wall centre
    - SkylineGenerator: frames standing on balanced horizontal shelves

    Contract:
    - never raises for valid input
    - returns an empty list only if no frame could be placed at all
    - every returned placement is in bounds and collision-free
    - with ``force_all`` every returned solution places every requested copy
    - no two returned solutions share a signature

    Example:
        ```python
        class DiagonalGenerator:
            def generate(self, data: RecommenderInput) -> list[LayoutSolution]:
                ...
        ```
    """

    def generate(self, data: "RecommenderInput") -> list["LayoutSolution"]:
        """Produce candidate layouts for a request.

        Args:
            data: Wall, inventory, obstacles and placement config.

        Returns:
            Accepted non-empty solutions in the order the strategy ranks them.
        """
        ...


__all__ = [
    "LayoutGenerator",
]
