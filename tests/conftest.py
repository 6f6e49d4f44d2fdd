"""
Shared test fixtures: FastAPI test client.
"""

import pytest
from fastapi.testclient import TestClient

from floorquote.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)
