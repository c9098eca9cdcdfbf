"""Output formatters for recommender results."""

from __future__ import annotations

import json
from typing import Iterable, Sequence

from gallerywall.contracts.messages import (
    Done,
    GenerationError,
    ResponseMessage,
    SolutionFound,
)
from gallerywall.domain.value_objects import LayoutSolution


class SolutionSummaryFormatter:
    """Formats forwarded solutions as a ranked text table."""

    def format(
        self,
        solutions: Sequence[LayoutSolution],
        total: int,
        requested: int,
    ) -> str:
        """Format solutions as a table.

        Args:
            solutions: Forwarded solutions, in ranking order.
            total: Total number of solutions the generator produced.
            requested: Total number of frames requested.
        """
        if not solutions:
            return "No layouts found."

        lines = [
            "LAYOUTS",
            "=" * 62,
            f"{'#':>3}  {'Placed':>10}  {'Coverage':>9}  {'Alignment':>9}  "
            f"{'Balance':>8}",
            "-" * 62,
        ]
        for rank, solution in enumerate(solutions, start=1):
            metrics = solution.metrics
            coverage = f"{metrics.coverage:.0%}" if metrics else "-"
            alignment = f"{metrics.alignment:.0%}" if metrics else "-"
            balance = f"{metrics.balance:.0%}" if metrics else "-"
            lines.append(
                f"{rank:>3}  {f'{solution.score}/{requested}':>10}  {coverage:>9}  "
                f"{alignment:>9}  {balance:>8}"
            )
        lines.append("-" * 62)
        lines.append(f"Showing {len(solutions)} of {total} layouts generated")
        return "\n".join(lines)


class MessageJsonFormatter:
    """Formats response messages as JSON lines, one message per line."""

    def format_message(self, message: ResponseMessage) -> str:
        return json.dumps(message.to_dict())

    def format(self, messages: Iterable[ResponseMessage]) -> str:
        return "\n".join(self.format_message(message) for message in messages)


def split_messages(
    messages: Iterable[ResponseMessage],
) -> tuple[list[LayoutSolution], int | None, str | None]:
    """Separate a message stream into solutions, final count and error.

    Returns:
        (solutions, count, error) where ``count`` is None if no ``Done``
        arrived and ``error`` is None unless a ``GenerationError`` arrived.
    """
    solutions: list[LayoutSolution] = []
    count: int | None = None
    error: str | None = None
    for message in messages:
        if isinstance(message, SolutionFound):
            solutions.append(message.payload)
        elif isinstance(message, Done):
            count = message.count
        elif isinstance(message, GenerationError):
            error = message.message
    return solutions, count, error


__all__ = [
    "MessageJsonFormatter",
    "SolutionSummaryFormatter",
    "split_messages",
]
