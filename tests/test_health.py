"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from collection_service.interfaces.api.resources.health import HealthResource


@pytest.fixture
def client() -> TestClient:
    """Create test client with the health endpoint."""
    app = App()
    app.add_route("/health", HealthResource())
    return TestClient(app)


def test_health_liveness(client: TestClient) -> None:
    """GET /health returns 200 with the service name."""
    result = client.simulate_get("/health")
    assert result.status_code == 200
    assert result.json == {"status": "OK", "service": "collection_service"}
