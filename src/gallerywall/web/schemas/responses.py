"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PlacedFrameSchema(BaseModel):
    """One placed frame."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Placement identifier")
    library_id: str = Field(..., alias="libraryId", description="Inventory item id")
    x: float = Field(..., description="Left edge in inches")
    y: float = Field(..., description="Top edge in inches")
    width: float = Field(..., description="Placed width in inches")
    height: float = Field(..., description="Placed height in inches")
    rotation: int = Field(default=0, description="0 or 90 degrees")


class LayoutMetricsSchema(BaseModel):
    """Descriptive quality measures, each in [0, 1]."""

    coverage: float
    alignment: float
    balance: float


class LayoutSolutionSchema(BaseModel):
    """One candidate arrangement."""

    id: str = Field(..., description="Solution identifier")
    frames: list[PlacedFrameSchema] = Field(default_factory=list)
    score: int = Field(..., description="Number of frames placed")
    metadata: LayoutMetricsSchema | None = Field(default=None)


class GenerateResponseSchema(BaseModel):
    """Response for layout generation."""

    solutions: list[LayoutSolutionSchema] = Field(
        default_factory=list, description="Forwarded solutions, best first"
    )
    count: int = Field(default=0, description="Total solutions generated")
    error: str | None = Field(default=None, description="Generation failure message")


class ValidationResultSchema(BaseModel):
    """Response for request validation."""

    is_valid: bool = Field(..., description="Whether the request is valid")
    errors: list[dict[str, Any]] = Field(default_factory=list)
    warnings: list[dict[str, Any]] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    error_type: str
    details: Any = None
