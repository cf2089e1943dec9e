"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from authzman.infrastructure.persistence.memory import InMemoryConfigurationStore
from authzman.interfaces.api.resources.health import HealthResource


class UnreachableStore(InMemoryConfigurationStore):
    """Store whose backend connection is down."""

    def ping(self) -> None:
        raise ConnectionError("connection refused")


def _client(store) -> TestClient:
    app = App()
    health = HealthResource(store)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints over a reachable store."""
    return _client(InMemoryConfigurationStore())


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200 when the store answers."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_store_unreachable() -> None:
    """GET /v1/health/ready returns 503 when the store ping fails."""
    result = _client(UnreachableStore()).simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "unavailable"


def test_health_liveness_ignores_store() -> None:
    """Liveness stays 200 while the store is down."""
    result = _client(UnreachableStore()).simulate_get("/v1/health")
    assert result.status_code == 200
