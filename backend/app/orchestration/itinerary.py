"""Itinerary synthesis - trip length to a sequence of TimelineDay."""

import random

from backend.app.models.common import TransitMode
from backend.app.models.intent import city_of
from backend.app.models.timeline import Activity, TimelineDay, TransportLeg

ARRIVAL_FRAMING = "Arrival & Orientation"
FINAL_FRAMING = "Final Explorations"

MORNING_SLOT = "9:00 AM - 11:30 AM"
MIDDAY_SLOT = "12:00 PM - 1:30 PM"
AFTERNOON_SLOT = "2:00 PM - 5:00 PM"

# Half-open ranges, as passed to rng.randrange
LEG_DURATION_RANGE_MIN = (10, 40)
WALK_DISTANCE_RANGE_HM = (5, 40)  # hectometres, rendered as km
TRANSIT_LINE_RANGE = (1, 6)

TRANSIT_MODES: tuple[TransitMode, ...] = (TransitMode.metro, TransitMode.bus, TransitMode.tram)


def day_title(day: int, total_days: int, city: str) -> str:
    """Positional title: arrival first, final last, exploring in between."""
    if day == 1:
        framing = ARRIVAL_FRAMING
    elif day == total_days:
        framing = FINAL_FRAMING
    else:
        framing = f"Exploring {city}"
    return f"Day {day}: {framing}"


def build_activities(day: int, city: str) -> tuple[Activity, ...]:
    """Morning sightseeing, midday dining, afternoon sightseeing."""
    return (
        Activity(
            name=f"{city} Point of Interest {day}-1",
            time_slot=MORNING_SLOT,
            description=f"A popular attraction in {city} to open day {day}.",
        ),
        Activity(
            name=f"{city} Lunch Spot",
            time_slot=MIDDAY_SLOT,
            description=f"A place to enjoy local cuisine in {city} on day {day}.",
        ),
        Activity(
            name=f"{city} Point of Interest {day}-2",
            time_slot=AFTERNOON_SLOT,
            description=f"Another interesting location in {city} for day {day}.",
        ),
    )


def build_legs(rng: random.Random) -> tuple[TransportLeg, ...]:
    """A walking leg followed by a public transit leg."""
    walk = TransportLeg(
        type=TransitMode.walk,
        duration_minutes=rng.randrange(*LEG_DURATION_RANGE_MIN),
        distance=f"{rng.randrange(*WALK_DISTANCE_RANGE_HM) / 10:.1f} km",
    )
    transit = TransportLeg(
        type=rng.choice(TRANSIT_MODES),
        duration_minutes=rng.randrange(*LEG_DURATION_RANGE_MIN),
        distance=f"Line {rng.randrange(*TRANSIT_LINE_RANGE)}",
    )
    return (walk, transit)


def synthesize_itinerary(destination: str, days: int, rng: random.Random) -> list[TimelineDay]:
    """Expand a trip into exactly `days` TimelineDay entries.

    Args:
        destination: "City, Country" destination
        days: Trip length, at least 1
        rng: Random source for leg durations, distances and modes

    Returns:
        One TimelineDay per trip day, in order

    Raises:
        ValueError: If days < 1
    """
    if days < 1:
        raise ValueError(f"days must be >= 1, got {days}")

    city = city_of(destination)

    return [
        TimelineDay(
            title=day_title(day, days, city),
            sites=build_activities(day, city),
            transportation=build_legs(rng),
        )
        for day in range(1, days + 1)
    ]
