"""Route assembly - merge intent and cost into an immutable Route record.

The only stage with a side effect: the assembled route is appended to the
route repository. The assembler never reads that repository.

Identifiers are a prefix plus a random 4-digit suffix. Collisions are
possible and are not checked; callers rely on the short identifier shape.
"""

import random
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from backend.app.db.repositories import RouteRepository
from backend.app.models.intent import TravelIntent
from backend.app.models.route import Route, RouteUser

ROUTE_ID_SUFFIX_RANGE = (1000, 10000)
MAX_CREATED_OFFSET_HOURS = 12
SITES_PER_DAY_MIN = 2

PLACEHOLDER_USER = RouteUser(
    id="u4",
    name="John Traveler",
    avatar="https://randomuser.me/api/portraits/men/32.jpg",
)

NAME_TEMPLATES: tuple[str, ...] = (
    "{days}-Day {city} Adventure",
    "{city} Explorer: {days} Day Journey",
    "Discovering {city} in {days} Days",
    "{city} Experience: {interest} & More",
    "The Ultimate {days}-Day {city} Itinerary",
)


def utcnow() -> datetime:
    """Current UTC instant."""
    return datetime.now(timezone.utc)


def generate_route_id(rng: random.Random, prefix: str = "r") -> str:
    """Prefix followed by a 4-digit numeric suffix."""
    return f"{prefix}{rng.randrange(*ROUTE_ID_SUFFIX_RANGE)}"


def generate_route_name(intent: TravelIntent, rng: random.Random) -> str:
    """Pick one of the fixed name templates."""
    template = rng.choice(NAME_TEMPLATES)
    return template.format(days=intent.days, city=intent.city, interest=intent.interests[0])


def estimate_sites(days: int, rng: random.Random) -> int:
    """Between 2 and 3 sites per day, floored: result in [2*days, 3*days)."""
    return int(days * (SITES_PER_DAY_MIN + rng.random()))


def backdated_timestamp(now: datetime, rng: random.Random) -> datetime:
    """Now minus a whole number of hours in [0, 12)."""
    return now - timedelta(hours=rng.randrange(MAX_CREATED_OFFSET_HOURS))


def assemble_route(
    intent: TravelIntent,
    cost: int,
    *,
    rng: random.Random,
    routes: RouteRepository,
    id_prefix: str = "r",
    clock: Callable[[], datetime] = utcnow,
) -> Route:
    """Build a Route from an intent and cost and append it to the repository.

    Args:
        intent: Extracted travel intent
        cost: Estimated total cost (must be > 0)
        rng: Random source for id, name, sites and timestamp offset
        routes: Repository receiving the new route
        id_prefix: Identifier prefix
        clock: Returns the current UTC instant (injected for testing)

    Returns:
        The appended Route
    """
    route = Route(
        id=generate_route_id(rng, id_prefix),
        name=generate_route_name(intent, rng),
        location=intent.destination,
        days=intent.days,
        sites=estimate_sites(intent.days, rng),
        cost=cost,
        upvotes=0,
        views=0,
        created_date=backdated_timestamp(clock(), rng),
        user=PLACEHOLDER_USER,
        interests=", ".join(intent.interests),
        query=intent.raw_query,
    )

    routes.append(route)
    return route
