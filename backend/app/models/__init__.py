"""Models package - re-exports for convenience."""

from backend.app.models.common import RouteSource, RuleCombination, TransitMode
from backend.app.models.intent import MAX_TRIP_DAYS, MIN_TRIP_DAYS, TravelIntent, city_of
from backend.app.models.route import GeneratedRoute, Route, RouteUser
from backend.app.models.timeline import Activity, TimelineDay, TransportLeg

__all__ = [
    # Common
    "TransitMode",
    "RuleCombination",
    "RouteSource",
    # Intent
    "TravelIntent",
    "MIN_TRIP_DAYS",
    "MAX_TRIP_DAYS",
    "city_of",
    # Route
    "Route",
    "RouteUser",
    "GeneratedRoute",
    # Timeline
    "TimelineDay",
    "Activity",
    "TransportLeg",
]
