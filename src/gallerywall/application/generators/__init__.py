"""Layout generators.

This package provides the five packing strategies, the shared randomized
search with signature deduplication, and a factory that selects a strategy
by name.

Example:
    ```python
    from gallerywall.application.generators import GeneratorFactory

    generator = GeneratorFactory().create_generator("grid")
    solutions = generator.generate(data)
    ```
"""

from .base import LayoutGenerator, SearchingGenerator
from .factory import GeneratorFactory, resolve_algorithm
from .grid import GridGenerator
from .masonry import MasonryGenerator
from .monte_carlo import MonteCarloGenerator
from .search import (
    RandomizedSearch,
    SearchBudget,
    finalize_solution,
    solution_signature,
)
from .skyline import SkylineGenerator
from .spiral import SpiralGenerator

__all__ = [
    "GeneratorFactory",
    "GridGenerator",
    "LayoutGenerator",
    "MasonryGenerator",
    "MonteCarloGenerator",
    "RandomizedSearch",
    "SearchBudget",
    "SearchingGenerator",
    "SkylineGenerator",
    "SpiralGenerator",
    "finalize_solution",
    "resolve_algorithm",
    "solution_signature",
]
