"""Configuration merging utilities for CLI override support.

Precedence is: CLI args > request file values > defaults. Only non-None CLI
arguments override request values.
"""

from typing import Any

from gallerywall.application.config.schema import (
    LayoutConfig,
    RecommenderConfiguration,
    SearchConfig,
)


def merge_config_with_cli(
    config: RecommenderConfiguration,
    *,
    algorithm: str | None = None,
    spacing: float | None = None,
    margin: float | None = None,
    force_all: bool | None = None,
    shelf_count: int | None = None,
    time_limit: float | None = None,
    max_attempts: int | None = None,
    seed: int | None = None,
) -> RecommenderConfiguration:
    """Merge CLI arguments with request values.

    Args:
        config: The base RecommenderConfiguration to merge with
        algorithm: Override for config.algorithm
        spacing: Override for config.spacing
        margin: Override for config.margin
        force_all: Override for config.force_all
        shelf_count: Override for config.shelf_count
        time_limit: Override for search.time_limit
        max_attempts: Override for search.max_attempts
        seed: Override for search.seed

    Returns:
        A new RecommenderConfiguration with merged values. The input is not
        modified.

    Example:
        >>> merged = merge_config_with_cli(config, algorithm="grid", seed=7)
        >>> merged.config.algorithm
        'grid'
    """
    layout_data = _apply_overrides(
        config.config.model_dump(),
        algorithm=algorithm,
        spacing=spacing,
        margin=margin,
        force_all=force_all,
        shelf_count=shelf_count,
    )

    search_overrides = {
        "time_limit": time_limit,
        "max_attempts": max_attempts,
        "seed": seed,
    }
    search: SearchConfig | None = config.search
    if any(value is not None for value in search_overrides.values()):
        base = config.search.model_dump() if config.search else {}
        search = SearchConfig.model_validate(_apply_overrides(base, **search_overrides))

    return config.model_copy(
        update={
            "config": LayoutConfig.model_validate(layout_data),
            "search": search,
        }
    )


def _apply_overrides(data: dict[str, Any], **overrides: Any) -> dict[str, Any]:
    """Return ``data`` with every non-None override applied."""
    merged = dict(data)
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


__all__ = ["merge_config_with_cli"]
