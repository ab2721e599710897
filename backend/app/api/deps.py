"""Shared FastAPI dependencies."""

from functools import lru_cache

from backend.app.config import get_settings
from backend.app.orchestration.service import RouteService, build_route_service


@lru_cache
def get_route_service() -> RouteService:
    """Process-wide route service (override in tests via dependency_overrides)."""
    return build_route_service(get_settings())
