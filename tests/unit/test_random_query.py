"""Tests for random query synthesis."""

import random
import re

import pytest

from backend.app.orchestration.random_query import (
    RANDOM_DESTINATIONS,
    build_random_query,
    describe_duration,
    join_interests,
)

QUERY_PATTERN = re.compile(
    r"I'm planning (a weekend|a week|\d+ days) in (.+) and I'm interested in exploring "
    r"(.+)\. What would you recommend\?"
)


@pytest.mark.parametrize(
    ("days", "expected"),
    [(1, "a day trip"), (2, "a weekend"), (3, "3 days"), (6, "6 days"), (7, "a week")],
)
def test_describe_duration(days: int, expected: str) -> None:
    assert describe_duration(days) == expected


def test_join_interests() -> None:
    assert join_interests(["a"]) == "a"
    assert join_interests(["a", "b"]) == "a and b"
    assert join_interests(["a", "b", "c"]) == "a, b and c"


@pytest.mark.parametrize("seed", range(15))
def test_build_random_query_shape(seed: int) -> None:
    query = build_random_query(random.Random(seed))
    match = QUERY_PATTERN.fullmatch(query)

    assert match is not None
    cities = {destination.split(",")[0] for destination in RANDOM_DESTINATIONS}
    assert match.group(2) in cities
    if match.group(1).endswith("days"):
        assert 3 <= int(match.group(1).split()[0]) <= 6


def test_build_random_query_is_seeded() -> None:
    assert build_random_query(random.Random(5)) == build_random_query(random.Random(5))
