"""Request configuration: schema, loading, validation and CLI merging.

Example:
    ```python
    from pathlib import Path
    from gallerywall.application.config import (
        config_to_input,
        load_config,
        validate_config,
    )

    config = load_config(Path("living-room.json"))
    result = validate_config(config)
    if result.is_valid:
        data = config_to_input(config)
    ```
"""

from gallerywall.application.config.adapter import (
    config_to_budget,
    config_to_input,
    config_to_rng,
)
from gallerywall.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from gallerywall.application.config.merger import merge_config_with_cli
from gallerywall.application.config.schema import (
    FrameConfig,
    LayoutConfig,
    ObstacleConfig,
    RecommenderConfiguration,
    SUPPORTED_VERSIONS,
    SearchConfig,
    WallConfig,
)
from gallerywall.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Schema
    "FrameConfig",
    "LayoutConfig",
    "ObstacleConfig",
    "RecommenderConfiguration",
    "SUPPORTED_VERSIONS",
    "SearchConfig",
    "WallConfig",
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Adapters
    "config_to_budget",
    "config_to_input",
    "config_to_rng",
    # Merger
    "merge_config_with_cli",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
]
