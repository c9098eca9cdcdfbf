"""Pydantic request schemas for the REST API."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class GenerateMessageRequest(BaseModel):
    """A GENERATE message: ``{"type": "GENERATE", "payload": {...}}``.

    The payload is validated separately against the request schema so
    errors are reported with the same paths as request files.
    """

    type: Literal["GENERATE"] = Field(default="GENERATE", description="Message type")
    payload: dict[str, Any] = Field(
        ..., description="Wall, inventory, obstacles, config and optional search"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a generation request without running it."""

    config: dict[str, Any] = Field(..., description="Generation request JSON")
