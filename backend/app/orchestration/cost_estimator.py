"""Trip cost estimation from destination and trip length."""

import random

from backend.app.models.intent import city_of

DAILY_RATES_USD: dict[str, int] = {
    "Tokyo": 400,
    "Kyoto": 350,
    "Paris": 350,
    "London": 380,
    "Rome": 320,
    "Barcelona": 320,
    "New York": 400,
    "Sydney": 370,
    "Bangkok": 200,
    "Amsterdam": 330,
}
DEFAULT_DAILY_RATE_USD = 300

VARIANCE_MIN = 0.85
VARIANCE_MAX = 1.15


def daily_rate_for(destination: str) -> int:
    """Flat daily rate keyed by the city part of the destination."""
    return DAILY_RATES_USD.get(city_of(destination), DEFAULT_DAILY_RATE_USD)


def estimate_cost(destination: str, days: int, rng: random.Random) -> int:
    """Estimate total trip cost in whole USD.

    cost = round(rate * days * variance), variance uniform in [0.85, 1.15].

    Args:
        destination: "City, Country" destination
        days: Trip length, at least 1
        rng: Random source for the variance draw

    Returns:
        Positive integer cost

    Raises:
        ValueError: If days < 1
    """
    if days < 1:
        raise ValueError(f"days must be >= 1, got {days}")

    variance = rng.uniform(VARIANCE_MIN, VARIANCE_MAX)
    return max(1, round(daily_rate_for(destination) * days * variance))
