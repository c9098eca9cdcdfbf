"""Integration tests for the REST API."""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from gallerywall.application.services import RecommenderService
from gallerywall.web import create_app
from gallerywall.web.dependencies import get_service_builder

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "requests"


def _payload(name: str) -> dict:
    return json.loads((FIXTURES_PATH / name).read_text())


@pytest.fixture
def client() -> TestClient:
    """Create a test client for a fresh app."""
    return TestClient(create_app())


class _FailingFactory:
    def create_generator(self, algorithm, should_stop=None):
        raise RuntimeError("no generator today")


# =============================================================================
# Health
# =============================================================================


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


# =============================================================================
# Generation
# =============================================================================


class TestGenerateEndpoint:
    """Tests for POST /api/v1/generate."""

    def test_generate_grid(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate",
            json={"type": "GENERATE", "payload": _payload("grid_living_room.json")},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assert body["error"] is None
        solution = body["solutions"][0]
        assert solution["score"] == 6
        assert len(solution["frames"]) == 6
        assert solution["frames"][0]["libraryId"] == "print"
        assert set(solution["metadata"]) == {"coverage", "alignment", "balance"}

    def test_type_defaults_to_generate(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate", json={"payload": _payload("camel_case_payload.json")}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["solutions"][0]["score"] == 4

    def test_wrong_message_type_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate",
            json={"type": "CANCEL", "payload": _payload("grid_living_room.json")},
        )
        assert response.status_code == 422

    def test_schema_errors_are_422(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate", json={"payload": _payload("invalid_values.json")}
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert "wall.width" in [detail["path"] for detail in body["details"]]

    def test_advisory_errors_are_422(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate", json={"payload": _payload("duplicate_ids.json")}
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "invalid_request"
        assert body["details"][0]["path"] == "inventory[1].id"

    def test_impossible_force_all_returns_nothing(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate", json={"payload": _payload("impossible_force_all.json")}
        )

        assert response.status_code == 200
        assert response.json() == {"solutions": [], "count": 0, "error": None}

    def test_generation_failure_is_reported(self) -> None:
        app = create_app()
        app.dependency_overrides[get_service_builder] = lambda: (
            lambda config: RecommenderService(_FailingFactory())
        )
        client = TestClient(app)

        response = client.post(
            "/api/v1/generate", json={"payload": _payload("grid_living_room.json")}
        )

        assert response.status_code == 200
        assert response.json() == {
            "solutions": [],
            "count": 0,
            "error": "no generator today",
        }


class TestStreamEndpoint:
    """Tests for POST /api/v1/generate/stream."""

    def test_streams_ndjson_messages(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate/stream",
            json={"type": "GENERATE", "payload": _payload("grid_living_room.json")},
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/x-ndjson")
        messages = [json.loads(line) for line in response.text.splitlines() if line]
        assert [m["type"] for m in messages] == ["SOLUTION_FOUND", "DONE"]
        assert messages[-1]["count"] == 1

    def test_stream_validation_error(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate/stream", json={"payload": _payload("invalid_values.json")}
        )
        assert response.status_code == 422


# =============================================================================
# Validation
# =============================================================================


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid_request(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": _payload("grid_living_room.json")}
        )

        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_warnings(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": _payload("with_warnings.json")}
        )

        body = response.json()
        assert body["is_valid"] is True
        assert len(body["warnings"]) == 4

    def test_errors(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": _payload("duplicate_ids.json")}
        )

        body = response.json()
        assert body["is_valid"] is False
        assert body["errors"][0]["path"] == "inventory[1].id"

    def test_schema_errors_are_422(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": _payload("invalid_values.json")}
        )
        assert response.status_code == 422


# =============================================================================
# OpenAPI
# =============================================================================


class TestOpenApi:
    """Tests for the generated API description."""

    @pytest.mark.parametrize("path", ["/api/v1/generate", "/api/v1/validate"])
    def test_422_documents_the_error_body(self, client: TestClient, path: str) -> None:
        schema = client.get("/openapi.json").json()
        error = schema["paths"][path]["post"]["responses"]["422"]

        ref = error["content"]["application/json"]["schema"]["$ref"]
        assert ref == "#/components/schemas/ErrorResponseSchema"
        assert set(schema["components"]["schemas"]["ErrorResponseSchema"]["properties"]) == {
            "error",
            "error_type",
            "details",
        }
