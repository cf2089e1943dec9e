"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from authzman.interfaces.api.app import create_app
from authzman.interfaces.api.middleware.cors import CORSMiddleware


@pytest.fixture
def app(manager, registry, store):
    """Falcon ASGI app over the in-memory manager."""
    return create_app(
        manager, registry, store, middleware=[CORSMiddleware(["http://localhost:3000"])]
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
