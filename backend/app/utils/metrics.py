"""Prometheus metrics for route generation."""

from prometheus_client import Counter, Histogram

from backend.app.models.common import RouteSource

route_generations_total = Counter(
    "route_generations_total",
    "Total route generation requests",
    ["source", "outcome"],
)

route_generation_latency_ms = Histogram(
    "route_generation_latency_ms",
    "Route generation latency in milliseconds, simulated delay included",
    ["source"],
    buckets=[10, 50, 100, 200, 500, 1000, 2000, 4000, 8000],
)

route_engine_errors_total = Counter(
    "route_engine_errors_total",
    "Total route engine errors",
    ["reason"],
)


class PrometheusRouteMetrics:
    """Prometheus-based route metrics implementation."""

    def record_generation(self, source: RouteSource, outcome: str, latency_ms: float) -> None:
        """Count a generation and record its latency."""
        route_generations_total.labels(source=source.value, outcome=outcome).inc()
        route_generation_latency_ms.labels(source=source.value).observe(latency_ms)

    def inc_error(self, reason: str) -> None:
        """Increment error counter."""
        route_engine_errors_total.labels(reason=reason).inc()
