"""Pydantic models for gallery wall request files.

This module defines the schema of a generation request: the wall, the frame
inventory, fixed obstacles, placement settings and search limits. Keys are
accepted in snake_case or camelCase, so the ``payload`` of a ``GENERATE``
message can be validated directly.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)
from pydantic.alias_generators import to_camel

# Supported schema versions for request files
# Version 1.0: Initial schema (wall, inventory, obstacles, config, search)
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

MAX_SHELF_COUNT = 20


class _RequestModel(BaseModel):
    """Shared model settings: camelCase aliases, unknown keys rejected."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        loc_by_alias=False,
    )


class WallConfig(_RequestModel):
    """Wall dimensions in inches.

    Attributes:
        width: Wall width (must be positive)
        height: Wall height (must be positive)
    """

    width: float = Field(..., gt=0, description="Wall width in inches")
    height: float = Field(..., gt=0, description="Wall height in inches")


class FrameConfig(_RequestModel):
    """One inventory entry: a frame size and how many copies to place.

    Attributes:
        id: Library identifier carried onto every placement
        width: Frame width in inches
        height: Frame height in inches
        count: Number of copies requested
    """

    id: str = Field(..., min_length=1, description="Library identifier")
    width: float = Field(..., gt=0, description="Frame width in inches")
    height: float = Field(..., gt=0, description="Frame height in inches")
    count: int = Field(default=1, ge=0, description="Copies requested")


class ObstacleConfig(_RequestModel):
    """A fixed no-placement zone such as a window or outlet.

    Attributes:
        x: Left edge, measured from the wall's left side
        y: Top edge, measured from the wall's top side
        width: Obstacle width
        height: Obstacle height
    """

    x: float
    y: float
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)


class LayoutConfig(_RequestModel):
    """Placement constraints.

    ``algorithm`` is a free string: unknown names fall back to monte_carlo at
    generation time and are reported as a validation warning.
    """

    spacing: float = Field(default=2.0, ge=0, description="Gap between frames")
    margin: float = Field(default=5.0, ge=0, description="Gap to the wall edges")
    algorithm: str = Field(default="monte_carlo", description="Packing strategy")
    force_all: bool = Field(default=False, description="Require every copy placed")
    shelf_count: int | None = Field(
        default=None, ge=1, le=MAX_SHELF_COUNT, description="Shelves (skyline only)"
    )


class SearchConfig(_RequestModel):
    """Limits for the randomized search.

    Attributes:
        time_limit: Wall-clock budget in seconds
        max_attempts: Cap on randomized attempts
        desired_solutions: Satisfactory layouts to collect before stopping
            (per-algorithm default when omitted)
        seed: Random seed for reproducible runs
    """

    time_limit: float = Field(default=5.0, gt=0)
    max_attempts: int = Field(default=100_000, ge=1)
    desired_solutions: int | None = Field(default=None, ge=1)
    seed: int | None = None


class RecommenderConfiguration(_RequestModel):
    """Root model of a generation request.

    Attributes:
        schema_version: Request format version
        wall: Wall dimensions
        inventory: Frames to place
        obstacles: Fixed no-placement zones
        config: Placement constraints
        search: Search limits (optional)
    """

    schema_version: str = Field(default="1.0", description="Request format version")
    wall: WallConfig
    inventory: list[FrameConfig] = Field(default_factory=list)
    obstacles: list[ObstacleConfig] = Field(default_factory=list)
    config: LayoutConfig = Field(default_factory=LayoutConfig)
    search: SearchConfig | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted for
        forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major = v.split(".")[0]
        supported_majors = {sv.split(".")[0] for sv in SUPPORTED_VERSIONS}
        if major in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )


__all__ = [
    "FrameConfig",
    "LayoutConfig",
    "MAX_SHELF_COUNT",
    "ObstacleConfig",
    "RecommenderConfiguration",
    "SUPPORTED_VERSIONS",
    "SearchConfig",
    "WallConfig",
]
