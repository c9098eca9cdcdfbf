"""Validation structures and layout advisory checks.

Schema validation (pydantic) guarantees each value is well formed on its
own. The checks here look at the request as a whole: duplicate frame ids,
margins that leave no room, frames that can never fit, obstacles hanging off
the wall and settings that will be ignored.
"""

from dataclasses import dataclass, field
from typing import Any

from gallerywall.application.config.adapter import config_to_input
from gallerywall.application.config.schema import RecommenderConfiguration
from gallerywall.domain.services import is_physically_impossible
from gallerywall.domain.value_objects import LayoutAlgorithm


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "inventory[1].id")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the request has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_inventory(config: RecommenderConfiguration) -> ValidationResult:
    """Check frame ids, counts and sizes against the usable wall area."""
    result = ValidationResult()

    seen: dict[str, int] = {}
    for index, frame in enumerate(config.inventory):
        if frame.id in seen:
            result.add_error(
                path=f"inventory[{index}].id",
                message=(
                    f"Duplicate frame id '{frame.id}' "
                    f"(first used by inventory[{seen[frame.id]}])"
                ),
                value=frame.id,
            )
        else:
            seen[frame.id] = index

    total = sum(frame.count for frame in config.inventory)
    if total == 0:
        result.add_warning(
            path="inventory",
            message="Inventory requests no frames; no layouts will be generated",
            suggestion="Add frames or raise their count",
        )

    margin = config.config.margin
    usable_width = config.wall.width - 2 * margin
    usable_height = config.wall.height - 2 * margin
    for index, frame in enumerate(config.inventory):
        fits_upright = frame.width <= usable_width and frame.height <= usable_height
        fits_rotated = frame.height <= usable_width and frame.width <= usable_height
        if not fits_upright and not fits_rotated:
            result.add_warning(
                path=f"inventory[{index}]",
                message=(
                    f"Frame '{frame.id}' ({frame.width:g}x{frame.height:g}) is larger "
                    f"than the usable wall area "
                    f"({max(0.0, usable_width):g}x{max(0.0, usable_height):g}) "
                    "and will never be placed"
                ),
                suggestion="Reduce the margin or remove the frame",
            )
    return result


def check_wall(config: RecommenderConfiguration) -> ValidationResult:
    """Check margins and obstacles against the wall."""
    result = ValidationResult()
    wall = config.wall
    margin = config.config.margin

    if 2 * margin >= wall.width or 2 * margin >= wall.height:
        result.add_error(
            path="config.margin",
            message=(
                f'Margin of {margin:g}" leaves no usable area on a '
                f'{wall.width:g}x{wall.height:g}" wall'
            ),
            value=margin,
        )

    for index, obstacle in enumerate(config.obstacles):
        outside = (
            obstacle.x < 0
            or obstacle.y < 0
            or obstacle.x + obstacle.width > wall.width
            or obstacle.y + obstacle.height > wall.height
        )
        if outside:
            result.add_warning(
                path=f"obstacles[{index}]",
                message="Obstacle extends beyond the wall",
                suggestion="Check the obstacle position and size",
            )
    return result


def check_layout_settings(config: RecommenderConfiguration) -> ValidationResult:
    """Check algorithm, shelf count and force_all feasibility."""
    result = ValidationResult()
    layout = config.config

    if layout.algorithm not in LayoutAlgorithm.values():
        result.add_warning(
            path="config.algorithm",
            message=(
                f"Unknown algorithm '{layout.algorithm}', "
                f"{LayoutAlgorithm.MONTE_CARLO.value} will be used"
            ),
            suggestion=f"Use one of: {', '.join(LayoutAlgorithm.values())}",
        )

    if layout.shelf_count is not None and layout.algorithm != LayoutAlgorithm.SKYLINE.value:
        result.add_warning(
            path="config.shelf_count",
            message="shelf_count is only used by the skyline algorithm",
        )

    if layout.force_all and is_physically_impossible(config_to_input(config)):
        result.add_warning(
            path="config.force_all",
            message=(
                "force_all is set but the frames' total area exceeds the "
                "available wall area; no layouts will be generated"
            ),
            suggestion="Disable force_all or remove frames",
        )
    return result


def validate_config(config: RecommenderConfiguration) -> ValidationResult:
    """Perform full validation of a generation request.

    Args:
        config: A RecommenderConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    result.merge(check_wall(config))
    result.merge(check_inventory(config))
    result.merge(check_layout_settings(config))
    return result


__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_inventory",
    "check_layout_settings",
    "check_wall",
    "validate_config",
]
