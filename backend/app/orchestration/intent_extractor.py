"""Intent extraction - free-text query to TravelIntent.

Pure function with no I/O or randomness. Never raises for any input string:
every field has a deterministic fallback.

Destination and duration use first-match-wins tables, so table order is part
of the contract. Interests use an accumulate-all table; when nothing matches
the destination-keyed defaults apply.
"""

import logging
import re

from backend.app.models.common import RuleCombination
from backend.app.models.intent import MAX_TRIP_DAYS, MIN_TRIP_DAYS, TravelIntent, city_of
from backend.app.orchestration.rules import Rule, RuleTable

logger = logging.getLogger(__name__)

DEFAULT_DESTINATION = "Paris, France"
DEFAULT_DAYS = 3

DESTINATION_RULES: RuleTable[str] = RuleTable(
    name="destination",
    combination=RuleCombination.first_match,
    rules=(
        Rule.of(r"tokyo|japan", "Tokyo, Japan"),
        Rule.of(r"rome|italy", "Rome, Italy"),
        Rule.of(r"barcelona|spain", "Barcelona, Spain"),
        Rule.of(r"london|uk|england", "London, UK"),
        Rule.of(r"new york|nyc|america|usa", "New York, USA"),
        Rule.of(r"sydney|australia", "Sydney, Australia"),
        Rule.of(r"paris|france", "Paris, France"),
        Rule.of(r"bangkok|thailand", "Bangkok, Thailand"),
        Rule.of(r"kyoto", "Kyoto, Japan"),
        Rule.of(r"amsterdam|netherlands", "Amsterdam, Netherlands"),
    ),
)


def clamp_days(days: int) -> int:
    """Clamp a requested trip length into the supported range."""
    return max(MIN_TRIP_DAYS, min(MAX_TRIP_DAYS, days))


def _explicit_days(match: re.Match[str]) -> int:
    return clamp_days(int(match.group(1)))


# "weekend" contains "week", so the week rule also claims weekend queries.
DURATION_RULES: RuleTable[int] = RuleTable(
    name="duration",
    combination=RuleCombination.first_match,
    rules=(
        Rule.of(r"week|7 day", 7),
        Rule.of(r"weekend|2 day", 2),
        Rule.of(r"(\d+)\s*(day|days)", _explicit_days),
    ),
)

INTEREST_RULES: RuleTable[str] = RuleTable(
    name="interests",
    combination=RuleCombination.accumulate,
    rules=(
        Rule.of(r"museum|gallery|exhibition|art", "art museums"),
        Rule.of(r"food|eat|cuisine|restaurant|dining|gastronomy", "local cuisine"),
        Rule.of(r"history|historical|ancient|heritage", "history"),
        Rule.of(r"beach|sea|ocean|coast|swim", "beaches"),
        Rule.of(r"shop|market|store|buy|mall", "shopping"),
        Rule.of(r"nature|hike|outdoor|mountain|park|garden", "nature"),
        Rule.of(r"nightlife|bar|club|party|evening", "nightlife"),
        Rule.of(r"culture|tradition|local|authentic", "culture"),
        Rule.of(r"architecture|building|design|structure", "architecture"),
        Rule.of(r"relax|spa|wellness|peaceful", "relaxation"),
    ),
)

DEFAULT_INTERESTS_BY_CITY: dict[str, tuple[str, ...]] = {
    "Tokyo": ("shopping", "culture", "food"),
    "Rome": ("history", "architecture", "cuisine"),
    "Barcelona": ("architecture", "beaches", "nightlife"),
    "London": ("history", "shopping", "culture"),
    "New York": ("art museums", "shopping", "food"),
    "Paris": ("art museums", "cuisine", "architecture"),
}

FALLBACK_INTERESTS: tuple[str, ...] = ("culture", "local cuisine", "architecture")


def resolve_destination(text: str) -> str:
    """Resolve destination from lower-cased query text."""
    return DESTINATION_RULES.first(text, DEFAULT_DESTINATION)


def resolve_days(text: str) -> int:
    """Resolve trip length from lower-cased query text."""
    return DURATION_RULES.first(text, DEFAULT_DAYS)


def resolve_interests(text: str, destination: str) -> tuple[str, ...]:
    """Collect interest tags, falling back to destination defaults.

    Tags are not deduplicated; each matching rule contributes its tag.
    """
    interests = INTEREST_RULES.evaluate(text)
    if interests:
        return tuple(interests)

    defaults = DEFAULT_INTERESTS_BY_CITY.get(city_of(destination), FALLBACK_INTERESTS)
    return tuple(defaults)


def extract_intent(query: str) -> TravelIntent:
    """Derive a TravelIntent from a raw query.

    Args:
        query: Free-text travel request (may be empty)

    Returns:
        Fully populated TravelIntent; raw_query keeps the original text
    """
    text = query.lower()

    destination = resolve_destination(text)
    days = resolve_days(text)
    interests = resolve_interests(text, destination)

    logger.debug(
        f"[extract_intent] destination={destination} days={days} interests={interests}"
    )

    return TravelIntent(
        destination=destination,
        days=days,
        interests=interests,
        raw_query=query,
    )
