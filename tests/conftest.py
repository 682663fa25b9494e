"""
Test configuration and fixtures for HueWheel tests.
"""
import pytest
from fastapi.testclient import TestClient

from huewheel.main import app
from huewheel.utils.metrics import reset_metrics


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_metrics_between_tests():
    """Reset metrics before each test."""
    reset_metrics()
