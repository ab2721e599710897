"""Integration tests for /health, /healthz and /metrics endpoints."""

from fastapi.testclient import TestClient

from backend.app.api.deps import get_route_service
from backend.app.config import Settings
from backend.app.main import app
from backend.app.orchestration.pipeline import RoutePipeline
from backend.app.orchestration.service import RouteService


class TestHealthEndpoint:
    """Test /health and /healthz endpoints."""

    def test_health_always_ok(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_healthz_returns_200_when_engine_enabled(self, client: TestClient) -> None:
        client.post("/routes", json={"query": "Rome"})

        response = client.get("/healthz")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["components"]["engine"] == "ok"
        assert data["components"]["store"] == "ok (1 routes)"

    def test_healthz_matches_disabled_service(self, pipeline: RoutePipeline) -> None:
        """Health and generation read the same engine flag."""
        settings = Settings(
            route_engine_enabled=False, simulated_latency_min_ms=0, simulated_latency_max_ms=0
        )
        app.dependency_overrides[get_route_service] = lambda: RouteService(pipeline, settings)
        try:
            client = TestClient(app)

            assert client.post("/routes", json={"query": "Rome"}).status_code == 503

            response = client.get("/healthz")

            assert response.status_code == 503
            data = response.json()
            assert data["status"] == "degraded"
            assert data["components"]["engine"] == "disabled"
        finally:
            app.dependency_overrides.clear()


class TestMetricsEndpoint:
    """Test /metrics endpoint."""

    def test_metrics_exposes_route_counters(self, client: TestClient) -> None:
        client.post("/routes", json={"query": "Rome"})

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "route_generations_total" in response.text
        assert "route_generation_latency_ms" in response.text


def test_root(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "Tour Guide Route API"
