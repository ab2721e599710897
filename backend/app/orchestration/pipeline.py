"""Synchronous route pipeline: extract -> estimate -> synthesize -> assemble.

Data flows strictly forward. Cost estimation and itinerary synthesis both
consume the intent and share nothing but the random source. All randomness
goes through the injected `random.Random`, so a seeded pipeline is fully
reproducible.
"""

import logging
import random
from collections.abc import Callable
from datetime import datetime

from backend.app.db.repositories import RouteRepository, TimelineRepository
from backend.app.models.intent import TravelIntent
from backend.app.models.route import GeneratedRoute
from backend.app.orchestration.assembler import assemble_route, utcnow
from backend.app.orchestration.cost_estimator import estimate_cost
from backend.app.orchestration.intent_extractor import extract_intent
from backend.app.orchestration.itinerary import synthesize_itinerary
from backend.app.orchestration.random_query import build_random_query

logger = logging.getLogger(__name__)


class RoutePipeline:
    """Route generation core bound to its random source and repositories."""

    def __init__(
        self,
        routes: RouteRepository,
        timelines: TimelineRepository,
        rng: random.Random | None = None,
        *,
        id_prefix: str = "r",
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.routes = routes
        self.timelines = timelines
        self.rng = rng if rng is not None else random.Random()
        self.id_prefix = id_prefix
        self.clock = clock

    def analyze_query(self, query: str) -> TravelIntent:
        """Extract intent only; no side effects."""
        return extract_intent(query)

    def generate_route(self, query: str) -> GeneratedRoute:
        """Run the full pipeline and store the route and its timeline.

        Args:
            query: Free-text travel request

        Returns:
            GeneratedRoute whose timeline has one entry per route day
        """
        intent = extract_intent(query)
        cost = estimate_cost(intent.destination, intent.days, self.rng)
        timeline = synthesize_itinerary(intent.destination, intent.days, self.rng)

        route = assemble_route(
            intent,
            cost,
            rng=self.rng,
            routes=self.routes,
            id_prefix=self.id_prefix,
            clock=self.clock,
        )
        self.timelines.save(route.id, timeline)

        logger.info(
            f"[generate_route] route_id={route.id} location={route.location} "
            f"days={route.days} cost={route.cost}"
        )

        return GeneratedRoute(route=route, timeline=timeline)

    def generate_random_route(self) -> GeneratedRoute:
        """Generate a route from a synthesized random query."""
        query = build_random_query(self.rng)
        logger.debug(f"[generate_random_route] query={query!r}")
        return self.generate_route(query)
