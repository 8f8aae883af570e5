"""Tests for the health check endpoint."""

import pytest
from fastapi.testclient import TestClient


@pytest.mark.unit
def test_health_check(client: TestClient) -> None:
    """Test the health check endpoint returns 200."""
    response = client.get("/health")
    assert response.status_code == 200


@pytest.mark.unit
def test_health_check_response_schema(client: TestClient) -> None:
    """Test the health check endpoint response has correct schema."""
    data = client.get("/health").json()

    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"
    assert data["environment"] == "development"
    assert data["user_count"] == 5
    assert data["message"] == "API is healthy"


@pytest.mark.unit
def test_health_check_response_json() -> None:
    """Test health check response is valid JSON."""
    from user_directory.models.health import HealthCheckResponse

    response = HealthCheckResponse(status="ok", version="0.1.0", environment="test")

    response_dict = response.model_dump()
    assert response_dict["status"] == "ok"
    assert response_dict["user_count"] == 0
