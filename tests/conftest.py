"""Shared pytest fixtures for all test suites."""

import random
from collections.abc import Callable, Generator
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from backend.app.api.deps import get_route_service
from backend.app.config import Settings
from backend.app.db.inmemory import InMemoryRouteRepository, InMemoryTimelineRepository
from backend.app.main import app
from backend.app.models.route import Route
from backend.app.orchestration.assembler import PLACEHOLDER_USER
from backend.app.orchestration.pipeline import RoutePipeline
from backend.app.orchestration.service import RouteService

FIXED_NOW = datetime(2025, 6, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def route_repo() -> InMemoryRouteRepository:
    return InMemoryRouteRepository()


@pytest.fixture
def timeline_repo() -> InMemoryTimelineRepository:
    return InMemoryTimelineRepository()


@pytest.fixture
def pipeline(
    route_repo: InMemoryRouteRepository,
    timeline_repo: InMemoryTimelineRepository,
    rng: random.Random,
) -> RoutePipeline:
    """Seeded pipeline with a fixed clock."""
    return RoutePipeline(route_repo, timeline_repo, rng, clock=lambda: FIXED_NOW)


@pytest.fixture
def zero_latency_settings() -> Settings:
    return Settings(simulated_latency_min_ms=0, simulated_latency_max_ms=0)


@pytest.fixture
def service(pipeline: RoutePipeline, zero_latency_settings: Settings) -> RouteService:
    return RouteService(pipeline, zero_latency_settings)


@pytest.fixture
def client(service: RouteService) -> Generator[TestClient, None, None]:
    """Test client wired to the seeded service."""
    app.dependency_overrides[get_route_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_route() -> Callable[..., Route]:
    """Factory for Route records with overridable fields."""

    def _make(route_id: str = "r1000", **overrides: object) -> Route:
        fields: dict[str, object] = {
            "id": route_id,
            "name": "3-Day Rome Adventure",
            "location": "Rome, Italy",
            "days": 3,
            "sites": 7,
            "cost": 960,
            "created_date": FIXED_NOW,
            "user": PLACEHOLDER_USER,
            "interests": "history, architecture",
            "query": "Rome for 3 days",
        }
        fields.update(overrides)
        return Route(**fields)

    return _make
