"""Tests for the health check endpoint."""

import pytest
from fastapi.testclient import TestClient

from users_api.config import Settings, get_settings
from users_api.main import app


@pytest.mark.unit
def test_health_check(memory_client: TestClient) -> None:
    """Test the health check endpoint returns 200."""
    response = memory_client.get("/api/health")
    assert response.status_code == 200


@pytest.mark.unit
def test_health_check_response_schema(memory_client: TestClient) -> None:
    """Test the health check endpoint response has correct schema."""
    app.dependency_overrides[get_settings] = lambda: Settings(environment="test")

    data = memory_client.get("/api/health").json()

    assert data["status"] == "ok"
    assert isinstance(data["version"], str)
    assert data["environment"] == "test"
    assert data["storage"] == "memory"
    assert data["message"] == "API is healthy"


@pytest.mark.unit
def test_health_check_reports_cosmos_storage(memory_client: TestClient) -> None:
    app.dependency_overrides[get_settings] = lambda: Settings(
        azure_cosmosdb_endpoint="https://users.documents.azure.com:443/"
    )

    assert memory_client.get("/api/health").json()["storage"] == "cosmos"
