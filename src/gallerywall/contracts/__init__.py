"""Contracts module - protocols and messages for cross-layer communication.

This module provides:
- The ``LayoutGenerator`` protocol every packing strategy implements
- The typed request/response messages of the recommender interface

Example:
    ```python
    from gallerywall.contracts import Done, LayoutGenerator, SolutionFound

    def forward(generator: LayoutGenerator, data):
        solutions = generator.generate(data)
        ...
    ```
"""

# Messages
from .messages import (
    CancelRequest as CancelRequest,
    Done as Done,
    GenerateRequest as GenerateRequest,
    GenerationError as GenerationError,
    RequestMessage as RequestMessage,
    ResponseMessage as ResponseMessage,
    SolutionFound as SolutionFound,
    is_terminal as is_terminal,
)

# Strategy protocols
from .strategies import (
    LayoutGenerator as LayoutGenerator,
)

__all__ = [
    "CancelRequest",
    "Done",
    "GenerateRequest",
    "GenerationError",
    "LayoutGenerator",
    "RequestMessage",
    "ResponseMessage",
    "SolutionFound",
    "is_terminal",
]
