"""Shared fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from catalogcore.catalog.service import reset_catalog_service
from catalogcore.infrastructure.config import settings
from catalogcore.main import app


@pytest.fixture(autouse=True)
def fresh_catalog_service():
    """Rebuild the catalog service from the embedded catalog for each test."""
    reset_catalog_service()
    yield
    reset_catalog_service()


@pytest.fixture
def client() -> TestClient:
    """Create test client without authentication."""
    return TestClient(app)


@pytest.fixture
def auth_client() -> TestClient:
    """Create test client with valid API key authentication."""
    return TestClient(
        app,
        headers={"Authorization": f"Bearer {settings.catalog_api_key}"},
    )


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Get authentication headers."""
    return {"Authorization": f"Bearer {settings.catalog_api_key}"}
