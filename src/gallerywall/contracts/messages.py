"""Request and response messages exchanged with the recommender.

A caller sends one ``GenerateRequest`` (and optionally a ``CancelRequest``)
and receives zero or more ``SolutionFound`` messages followed by exactly one
``Done``, or a single ``GenerationError`` instead of ``Done``.

The ``to_dict`` forms match the JSON wire format::

    {"type": "SOLUTION_FOUND", "payload": {...}}
    {"type": "DONE", "count": 12}
    {"type": "ERROR", "message": "..."}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from gallerywall.domain.value_objects import LayoutSolution, RecommenderInput

MESSAGE_GENERATE = "GENERATE"
MESSAGE_CANCEL = "CANCEL"
MESSAGE_SOLUTION_FOUND = "SOLUTION_FOUND"
MESSAGE_DONE = "DONE"
MESSAGE_ERROR = "ERROR"


@dataclass(frozen=True)
class GenerateRequest:
    """Ask the recommender to generate layouts for ``payload``."""

    payload: RecommenderInput

    @property
    def type(self) -> str:
        return MESSAGE_GENERATE


@dataclass(frozen=True)
class CancelRequest:
    """Ask the recommender to stop the request in flight.

    Cancellation is cooperative: the search returns what it has found so far
    and the request still finishes with a ``Done`` message.
    """

    @property
    def type(self) -> str:
        return MESSAGE_CANCEL


@dataclass(frozen=True)
class SolutionFound:
    """One forwarded solution."""

    payload: LayoutSolution

    @property
    def type(self) -> str:
        return MESSAGE_SOLUTION_FOUND

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "payload": self.payload.to_dict()}


@dataclass(frozen=True)
class Done:
    """Completion signal carrying the total number of generated solutions.

    ``count`` may exceed the number of ``SolutionFound`` messages sent, since
    only the first few solutions are forwarded.
    """

    count: int

    @property
    def type(self) -> str:
        return MESSAGE_DONE

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "count": self.count}


@dataclass(frozen=True)
class GenerationError:
    """Unexpected failure during generation. No ``Done`` follows it."""

    message: str

    @property
    def type(self) -> str:
        return MESSAGE_ERROR

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "message": self.message}


RequestMessage = Union[GenerateRequest, CancelRequest]
ResponseMessage = Union[SolutionFound, Done, GenerationError]


def is_terminal(message: ResponseMessage) -> bool:
    """True for the last message of a request (``Done`` or ``GenerationError``)."""
    return isinstance(message, (Done, GenerationError))


__all__ = [
    "CancelRequest",
    "Done",
    "GenerateRequest",
    "GenerationError",
    "MESSAGE_CANCEL",
    "MESSAGE_DONE",
    "MESSAGE_ERROR",
    "MESSAGE_GENERATE",
    "MESSAGE_SOLUTION_FOUND",
    "RequestMessage",
    "ResponseMessage",
    "SolutionFound",
    "is_terminal",
]
