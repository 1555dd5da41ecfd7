"""
Pytest fixtures for user gateway tests
"""

from typing import Any, Dict

import pytest
import respx
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

DATA_SERVICE_URL = "http://data-service.test"


@pytest.fixture
def settings() -> Settings:
    """Gateway settings pointing at a mocked data service"""
    return Settings(
        _env_file=None,
        service_name="user-gateway",
        data_service_url=DATA_SERVICE_URL,
        data_service_timeout=5.0,
        log_format="console",
    )


@pytest.fixture
def client(settings):
    """Test client with the application lifespan running"""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def upstream():
    """Mocked data service; unmatched requests fail the test"""
    with respx.mock(base_url=DATA_SERVICE_URL, assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def sample_user() -> Dict[str, Any]:
    """User record as served by the data service"""
    return {
        "id": 1,
        "name": "John Doe",
        "email": "john@example.com",
        "role": "admin",
    }
