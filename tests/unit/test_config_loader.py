"""Unit tests for request schema, loading and domain adapters."""

import json
from pathlib import Path

import pytest

from gallerywall.application.config import (
    ConfigError,
    RecommenderConfiguration,
    config_to_budget,
    config_to_input,
    config_to_rng,
    load_config,
    load_config_from_dict,
)
from gallerywall.domain.value_objects import InventoryItem, Obstacle, Wall

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "requests"


def _minimal() -> dict:
    return {"wall": {"width": 100, "height": 80}}


# =============================================================================
# Schema
# =============================================================================


class TestRequestSchema:
    """Tests for RecommenderConfiguration validation."""

    def test_minimal_request_uses_defaults(self) -> None:
        config = load_config_from_dict(_minimal())

        assert config.schema_version == "1.0"
        assert config.inventory == []
        assert config.obstacles == []
        assert config.config.spacing == 2.0
        assert config.config.margin == 5.0
        assert config.config.algorithm == "monte_carlo"
        assert config.config.force_all is False
        assert config.search is None

    def test_frame_count_defaults_to_one(self) -> None:
        data = _minimal() | {"inventory": [{"id": "a", "width": 5, "height": 7}]}
        assert load_config_from_dict(data).inventory[0].count == 1

    def test_accepts_camel_case_keys(self) -> None:
        data = _minimal() | {
            "schemaVersion": "1.0",
            "config": {"forceAll": True, "shelfCount": 2, "algorithm": "skyline"},
            "search": {"timeLimit": 1.5, "maxAttempts": 10},
        }
        config = load_config_from_dict(data)

        assert config.config.force_all is True
        assert config.config.shelf_count == 2
        assert config.search is not None
        assert config.search.time_limit == 1.5
        assert config.search.max_attempts == 10

    def test_newer_minor_version_accepted(self) -> None:
        config = load_config_from_dict(_minimal() | {"schema_version": "1.3"})
        assert config.schema_version == "1.3"

    def test_unsupported_major_version_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_minimal() | {"schema_version": "2.0"})
        assert "Unsupported schema version" in exc_info.value.message

    @pytest.mark.parametrize(
        ("patch", "path"),
        [
            ({"wall": {"width": 0, "height": 80}}, "wall.width"),
            ({"inventory": [{"id": "", "width": 5, "height": 5}]}, "inventory[0].id"),
            ({"inventory": [{"id": "a", "width": 5, "height": -1}]}, "inventory[0].height"),
            ({"inventory": [{"id": "a", "width": 5, "height": 5, "count": -2}]}, "inventory[0].count"),
            ({"obstacles": [{"x": 0, "y": 0, "width": -1, "height": 5}]}, "obstacles[0].width"),
            ({"config": {"spacing": -1}}, "config.spacing"),
            ({"config": {"shelf_count": 0}}, "config.shelf_count"),
            ({"search": {"time_limit": 0}}, "search.time_limit"),
        ],
    )
    def test_invalid_values_report_json_path(self, patch: dict, path: str) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_minimal() | patch)

        error = exc_info.value
        assert error.error_type == "validation"
        assert path in [detail["path"] for detail in error.details]

    def test_unknown_keys_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_minimal() | {"frames": []})
        assert exc_info.value.details[0]["path"] == "frames"

    def test_missing_wall_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({})
        assert exc_info.value.message.startswith("Request validation failed:")


# =============================================================================
# Loading files
# =============================================================================


class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_fixture(self) -> None:
        config = load_config(FIXTURES_PATH / "grid_living_room.json")

        assert isinstance(config, RecommenderConfiguration)
        assert config.config.algorithm == "grid"
        assert config.inventory[0].count == 6

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "invalid_json.json")

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert "line" in error.details[0]

    def test_schema_errors_keep_the_path(self) -> None:
        path = FIXTURES_PATH / "invalid_values.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.path == path
        paths = {detail["path"] for detail in error.details}
        assert {"wall.width", "inventory[0].height", "frames"} <= paths

    def test_round_trips_through_json(self, tmp_path: Path) -> None:
        path = tmp_path / "request.json"
        data = _minimal() | {"inventory": [{"id": "a", "width": 5, "height": 7}]}
        path.write_text(json.dumps(data))

        assert load_config(path) == load_config_from_dict(data)


# =============================================================================
# Adapters
# =============================================================================


class TestAdapters:
    """Tests for the schema-to-domain adapters."""

    def test_config_to_input(self) -> None:
        config = load_config_from_dict(
            {
                "wall": {"width": 120, "height": 80},
                "inventory": [{"id": "a", "width": 5, "height": 7, "count": 3}],
                "obstacles": [{"x": 1, "y": 2, "width": 3, "height": 4}],
                "config": {"spacing": 1, "margin": 2, "algorithm": "grid"},
            }
        )
        data = config_to_input(config)

        assert data.wall == Wall(120.0, 80.0)
        assert data.inventory == (InventoryItem("a", 5.0, 7.0, 3),)
        assert data.obstacles == (Obstacle(1.0, 2.0, 3.0, 4.0),)
        assert data.config.spacing == 1.0
        assert data.config.margin == 2.0
        assert data.config.algorithm == "grid"
        assert data.total_requested == 3

    def test_budget_defaults_without_search_block(self) -> None:
        budget = config_to_budget(load_config_from_dict(_minimal()))
        assert budget.time_limit == 5.0
        assert budget.max_attempts == 100_000

    def test_budget_from_search_block(self) -> None:
        config = load_config_from_dict(
            _minimal()
            | {"search": {"time_limit": 1.0, "max_attempts": 5, "desired_solutions": 2}}
        )
        budget = config_to_budget(config)
        assert (budget.time_limit, budget.max_attempts, budget.desired_solutions) == (
            1.0,
            5,
            2,
        )

    def test_rng_only_when_seeded(self) -> None:
        assert config_to_rng(load_config_from_dict(_minimal())) is None

        seeded = load_config_from_dict(_minimal() | {"search": {"seed": 3}})
        first = config_to_rng(seeded)
        second = config_to_rng(seeded)
        assert first is not None and second is not None
        assert first.random() == second.random()
