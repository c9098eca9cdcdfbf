"""Infrastructure layer: text, JSON and ASCII diagram output."""

from gallerywall.infrastructure.formatters import (
    MessageJsonFormatter,
    SolutionSummaryFormatter,
    split_messages,
)
from gallerywall.infrastructure.layout_diagram_renderer import LayoutDiagramRenderer

__all__ = [
    "LayoutDiagramRenderer",
    "MessageJsonFormatter",
    "SolutionSummaryFormatter",
    "split_messages",
]
