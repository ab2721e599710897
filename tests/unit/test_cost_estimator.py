"""Tests for trip cost estimation."""

import random

import pytest

from backend.app.orchestration.cost_estimator import (
    DEFAULT_DAILY_RATE_USD,
    VARIANCE_MAX,
    VARIANCE_MIN,
    daily_rate_for,
    estimate_cost,
)


class FixedVariance(random.Random):
    """Random source whose uniform() always returns a fixed value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def uniform(self, a: float, b: float) -> float:
        return self.value


def test_daily_rate_uses_city_portion() -> None:
    assert daily_rate_for("Tokyo, Japan") == 400
    assert daily_rate_for("Bangkok, Thailand") == 200


def test_daily_rate_default_for_unknown_city() -> None:
    assert daily_rate_for("Cairo, Egypt") == DEFAULT_DAILY_RATE_USD


def test_exact_cost_with_neutral_variance() -> None:
    """rate * days * 1.0."""
    assert estimate_cost("Tokyo, Japan", 7, FixedVariance(1.0)) == 2800


def test_exact_cost_at_variance_bounds() -> None:
    assert estimate_cost("Paris, France", 2, FixedVariance(VARIANCE_MIN)) == 595
    assert estimate_cost("Paris, France", 2, FixedVariance(VARIANCE_MAX)) == 805


def test_default_rate_applied() -> None:
    assert estimate_cost("Cairo, Egypt", 3, FixedVariance(1.0)) == 900


@pytest.mark.parametrize("seed", range(25))
def test_cost_within_variance_bounds(seed: int) -> None:
    """Seeded costs stay within [rate*days*0.85, rate*days*1.15] rounded."""
    cost = estimate_cost("London, UK", 4, random.Random(seed))
    base = 380 * 4

    assert round(base * VARIANCE_MIN) <= cost <= round(base * VARIANCE_MAX)
    assert cost > 0


def test_cost_is_reproducible_for_same_seed() -> None:
    first = estimate_cost("Rome, Italy", 5, random.Random(123))
    second = estimate_cost("Rome, Italy", 5, random.Random(123))

    assert first == second


def test_rejects_non_positive_days() -> None:
    with pytest.raises(ValueError, match="days must be >= 1"):
        estimate_cost("Rome, Italy", 0, random.Random(0))
