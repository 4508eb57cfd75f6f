"""Pytest configuration and fixtures."""

from collections.abc import Iterator
from unittest.mock import create_autospec

import pytest
from fastapi.testclient import TestClient

from users_api.main import app
from users_api.services import get_user_service, reset_services
from users_common.services.user_service import InMemoryUserService, UserService


@pytest.fixture(autouse=True)
def _clean_state() -> Iterator[None]:
    """Reset cached services and dependency overrides between tests."""
    reset_services()
    yield
    app.dependency_overrides.clear()
    reset_services()


@pytest.fixture
def user_service() -> UserService:
    """Mocked user service with the UserService interface."""
    return create_autospec(UserService, instance=True)


@pytest.fixture
def client(user_service: UserService) -> TestClient:
    """Test client whose routes talk to the mocked user service."""
    app.dependency_overrides[get_user_service] = lambda: user_service
    return TestClient(app)


@pytest.fixture
def memory_client() -> TestClient:
    """Test client backed by a fresh in-memory user service."""
    service = InMemoryUserService()
    app.dependency_overrides[get_user_service] = lambda: service
    return TestClient(app)


@pytest.fixture
def david() -> dict:
    """A valid user payload."""
    return {
        "email": "david.parker@gmail.com",
        "firstName": "David",
        "lastName": "Parker",
        "password": "avid808",
    }
