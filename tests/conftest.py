"""
Shared pytest fixtures.

The document store is replaced by a MagicMock whose collections expose
AsyncMock driver methods (see tests/factories.py), so no MongoDB server is
needed. The mock store is installed on app.state, where the get_store
dependency and the health endpoints look for it.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Override settings for testing BEFORE any app imports
os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_LEVEL"] = "WARNING"

from tests.factories import make_store  # noqa: E402


@pytest.fixture
def store():
    """Mock store with STRICT_NOT_FOUND enabled (the default policy)."""
    return make_store(strict=True)


@pytest.fixture
def lenient_store():
    """Mock store answering misses with 204/null instead of 404."""
    return make_store(strict=False)


def _client_for(mock_store):
    from app.main import app
    app.state.store = mock_store
    return app, TestClient(app)


@pytest.fixture
def client(store):
    app, test_client = _client_for(store)
    yield test_client
    app.state.store = None


@pytest.fixture
def lenient_client(lenient_store):
    app, test_client = _client_for(lenient_store)
    yield test_client
    app.state.store = None
