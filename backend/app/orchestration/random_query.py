"""Random travel query synthesis for surprise routes."""

import random

RANDOM_DESTINATIONS: tuple[str, ...] = (
    "Tokyo, Japan",
    "Paris, France",
    "Rome, Italy",
    "Barcelona, Spain",
    "London, UK",
    "New York, USA",
    "Sydney, Australia",
    "Cairo, Egypt",
    "Bangkok, Thailand",
    "Rio de Janeiro, Brazil",
    "Kyoto, Japan",
    "Amsterdam, Netherlands",
    "Istanbul, Turkey",
    "Marrakech, Morocco",
    "Prague, Czech Republic",
)

RANDOM_INTERESTS: tuple[str, ...] = (
    "art museums and galleries",
    "local cuisine and food tours",
    "historical sites and architecture",
    "beautiful beaches and coastal views",
    "shopping and local markets",
    "outdoor activities and nature",
    "nightlife and entertainment",
    "cultural performances and festivals",
    "local crafts and artisans",
    "religious and spiritual sites",
)

RANDOM_DAYS_RANGE = (2, 7)  # inclusive
RANDOM_INTEREST_COUNT_RANGE = (2, 3)  # inclusive


def describe_duration(days: int) -> str:
    """Natural phrasing for a trip length."""
    if days == 1:
        return "a day trip"
    if days == 2:
        return "a weekend"
    if days == 7:
        return "a week"
    return f"{days} days"


def join_interests(interests: list[str]) -> str:
    """'a', 'a and b', 'a, b and c'."""
    if len(interests) <= 1:
        return "".join(interests)
    return f"{', '.join(interests[:-1])} and {interests[-1]}"


def build_random_query(rng: random.Random) -> str:
    """Compose a plausible travel request from the fixed pools.

    Args:
        rng: Random source for destination, duration and interests

    Returns:
        Query text suitable for generate_route
    """
    destination = rng.choice(RANDOM_DESTINATIONS)
    days = rng.randint(*RANDOM_DAYS_RANGE)
    interests = rng.sample(RANDOM_INTERESTS, rng.randint(*RANDOM_INTEREST_COUNT_RANGE))

    city = destination.split(",")[0]
    return (
        f"I'm planning {describe_duration(days)} in {city} and I'm interested in exploring "
        f"{join_interests(interests)}. What would you recommend?"
    )
