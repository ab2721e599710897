"""Async route service - the boundary callers talk to.

Wraps the synchronous RoutePipeline with:
- An enable flag (disabled engine raises RouteEngineUnavailableError)
- Simulated upstream latency (uniform in the configured range)
- Metrics and structured logging per generation

The pipeline itself never suspends; every pipeline call runs to completion
between awaits, so concurrent requests never interleave inside a stage.
"""

import asyncio
import logging
import random
import time
from collections.abc import Awaitable, Callable

from backend.app.config import Settings
from backend.app.db.inmemory import InMemoryRouteRepository, InMemoryTimelineRepository
from backend.app.db.queries import rank_routes
from backend.app.models.common import RouteSource
from backend.app.models.intent import TravelIntent
from backend.app.models.route import GeneratedRoute, Route
from backend.app.models.timeline import TimelineDay
from backend.app.orchestration.pipeline import RoutePipeline
from backend.app.utils.logging import StructuredRouteLogger
from backend.app.utils.metrics import PrometheusRouteMetrics

logger = logging.getLogger(__name__)


class RouteEngineUnavailableError(Exception):
    """Route engine is disabled or misconfigured."""


class RouteService:
    """Async facade over the route pipeline."""

    def __init__(
        self,
        pipeline: RoutePipeline,
        settings: Settings,
        metrics: PrometheusRouteMetrics | None = None,
        route_logger: StructuredRouteLogger | None = None,
        sleep_fn: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        """Initialize service.

        Args:
            pipeline: Synchronous route pipeline
            settings: Application settings (enable flag, latency range)
            metrics: Metrics recorder (optional)
            route_logger: Structured logger (optional)
            sleep_fn: Injectable sleep function (default: asyncio.sleep)
        """
        self.pipeline = pipeline
        self._settings = settings
        self._metrics = metrics or PrometheusRouteMetrics()
        self._logger = route_logger or StructuredRouteLogger()
        self._sleep = sleep_fn or asyncio.sleep

    @property
    def enabled(self) -> bool:
        """Whether this service accepts generation requests."""
        return self._settings.route_engine_enabled

    def _ensure_enabled(self) -> None:
        if not self.enabled:
            self._metrics.inc_error("engine_disabled")
            raise RouteEngineUnavailableError("route engine is disabled")

    async def _simulate_latency(self) -> None:
        low = self._settings.simulated_latency_min_ms
        high = self._settings.simulated_latency_max_ms
        if high <= 0:
            return
        delay_ms = random.uniform(max(0, low), max(low, high))
        await self._sleep(delay_ms / 1000)

    async def analyze_query(self, query: str) -> TravelIntent:
        """Extract a TravelIntent from a query.

        Raises:
            RouteEngineUnavailableError: If the engine is disabled
        """
        self._ensure_enabled()
        await self._simulate_latency()
        return self.pipeline.analyze_query(query)

    async def generate_route(self, query: str) -> GeneratedRoute:
        """Generate and store a route for a query.

        Raises:
            RouteEngineUnavailableError: If the engine is disabled
        """
        return await self._generate(RouteSource.query, lambda: self.pipeline.generate_route(query))

    async def generate_random_route(self) -> GeneratedRoute:
        """Generate and store a route for a synthesized random query.

        Raises:
            RouteEngineUnavailableError: If the engine is disabled
        """
        return await self._generate(RouteSource.random, self.pipeline.generate_random_route)

    async def _generate(
        self, source: RouteSource, run: Callable[[], GeneratedRoute]
    ) -> GeneratedRoute:
        start_time = time.monotonic()
        try:
            self._ensure_enabled()
            await self._simulate_latency()
            generated = run()
        except RouteEngineUnavailableError:
            elapsed_ms = (time.monotonic() - start_time) * 1000
            self._metrics.record_generation(source, "unavailable", elapsed_ms)
            self._logger.log_generation(
                source, "unavailable", elapsed_ms, error_reason="engine_disabled"
            )
            raise
        except Exception as e:
            elapsed_ms = (time.monotonic() - start_time) * 1000
            self._metrics.record_generation(source, "error", elapsed_ms)
            self._metrics.inc_error("execution_error")
            self._logger.log_generation(
                source, "error", elapsed_ms, error_reason=type(e).__name__
            )
            raise

        elapsed_ms = (time.monotonic() - start_time) * 1000
        self._metrics.record_generation(source, "success", elapsed_ms)
        self._logger.log_generation(source, "success", elapsed_ms, route=generated.route)
        return generated

    async def get_timeline(self, route_id: str) -> list[TimelineDay] | None:
        """Timeline stored for a route, or None for an unknown id."""
        await self._simulate_latency()
        return self.pipeline.timelines.get(route_id)

    async def rank_routes(self, sort_by: str | None = None, order: str = "desc") -> list[Route]:
        """All stored routes, ranked.

        Raises:
            ValueError: If sort_by or order is not supported
        """
        await self._simulate_latency()
        return rank_routes(
            self.pipeline.routes.all(), sort_by or self._settings.default_rank_sort, order
        )


def build_route_service(settings: Settings) -> RouteService:
    """Wire a RouteService with in-memory repositories.

    Args:
        settings: Application settings

    Returns:
        RouteService seeded from settings.rng_seed (OS entropy when None)
    """
    pipeline = RoutePipeline(
        routes=InMemoryRouteRepository(),
        timelines=InMemoryTimelineRepository(),
        rng=random.Random(settings.rng_seed),
        id_prefix=settings.route_id_prefix,
    )
    logger.info(f"[build_route_service] enabled={settings.route_engine_enabled}")
    return RouteService(pipeline, settings)
