"""Common types and enums shared across all models."""

from enum import Enum


class TransitMode(str, Enum):
    """Transportation mode for a timeline leg."""

    walk = "Walk"
    metro = "Metro"
    bus = "Bus"
    tram = "Tram"


class RuleCombination(str, Enum):
    """How a rule table combines its matching rules."""

    first_match = "FIRST_MATCH"
    accumulate = "ACCUMULATE"


class RouteSource(str, Enum):
    """Where a generation request came from."""

    query = "query"
    random = "random"
