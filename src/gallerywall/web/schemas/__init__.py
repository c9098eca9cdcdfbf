"""Pydantic schemas for the REST API."""

from gallerywall.web.schemas.requests import (
    ConfigValidateRequest,
    GenerateMessageRequest,
)
from gallerywall.web.schemas.responses import (
    ErrorResponseSchema,
    GenerateResponseSchema,
    LayoutMetricsSchema,
    LayoutSolutionSchema,
    PlacedFrameSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "GenerateMessageRequest",
    # Responses
    "ErrorResponseSchema",
    "GenerateResponseSchema",
    "LayoutMetricsSchema",
    "LayoutSolutionSchema",
    "PlacedFrameSchema",
    "ValidationResultSchema",
]
