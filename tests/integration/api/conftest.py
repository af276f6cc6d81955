"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from userhub.infrastructure.persistence.memory import InMemoryUserRepository
from userhub.presentation.api.app import API_V1_PREFIX, create_app
from userhub_config import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def users_url(api_v1_prefix) -> str:
    return f"{api_v1_prefix}/users"


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        _env_file=None,
        app_name="userhub-test",
        api_host="127.0.0.1",
        api_port=3000,
        api_debug=True,
        api_cors_origins="http://localhost:5173",
        seed_sample_users=False,
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Repository seeded with Alice Johnson and Bob Smith."""
    return InMemoryUserRepository.with_sample_data()


@pytest.fixture
def test_client(api_settings, user_repository) -> TestClient:
    """Create a test client over a seeded in-memory repository."""
    app = create_app(settings=api_settings, user_repository=user_repository)
    return TestClient(app)


@pytest.fixture
def empty_client(api_settings) -> TestClient:
    """Create a test client over an empty repository."""
    app = create_app(settings=api_settings)
    return TestClient(app)


@pytest.fixture
def zed(test_client, users_url) -> dict:
    """Create the user Zed and return its response payload."""
    response = test_client.post(
        users_url,
        json={"name": "Zed", "email": "zed@x.com", "age": 40},
    )
    assert response.status_code == 201
    return response.json()["data"]
