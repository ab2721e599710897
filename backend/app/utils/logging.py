"""Structured logging for route generation."""

import logging
from typing import Any

from backend.app.models.common import RouteSource
from backend.app.models.route import Route

logger = logging.getLogger(__name__)


class StructuredRouteLogger:
    """Structured logger for route generation requests."""

    def log_generation(
        self,
        source: RouteSource,
        outcome: str,
        latency_ms: float,
        route: Route | None = None,
        error_reason: str | None = None,
    ) -> None:
        """Log one generation request with structured data."""
        log_data: dict[str, Any] = {
            "source": source.value,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
        }

        if route is not None:
            log_data["route_id"] = route.id
            log_data["destination"] = route.location
            log_data["days"] = route.days
            log_data["cost"] = route.cost

        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Route generation: {source.value} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
