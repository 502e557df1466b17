"""Pytest configuration and shared fixtures for tests."""

import pytest
from fastapi.testclient import TestClient

from taxspine.main import app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for API testing.

    Returns:
        FastAPI TestClient instance.
    """
    return TestClient(app)
