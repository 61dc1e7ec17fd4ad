"""Shared fixtures for the RSVP core test suite."""

import pytest
from fastapi.testclient import TestClient

from rsvp_core.config import Settings
from rsvp_core.main import app


@pytest.fixture
def client():
    """HTTP client for the FastAPI application."""
    return TestClient(app)


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the cached instance."""
    return Settings()
