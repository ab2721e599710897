"""Test that constants are accessible from Settings and not duplicated."""

import pytest
from pydantic import ValidationError

from backend.app.config import Settings, get_settings


def test_settings_accessible() -> None:
    """Test that Settings can be imported and accessed."""
    settings = get_settings()
    assert settings is not None


def test_settings_cached() -> None:
    """Test that get_settings returns the same instance."""
    assert get_settings() is get_settings()


def test_latency_range_is_ordered() -> None:
    """Test that latency bounds are non-negative and ordered."""
    settings = get_settings()
    assert settings.simulated_latency_min_ms >= 0
    assert settings.simulated_latency_max_ms >= settings.simulated_latency_min_ms


def test_defaults() -> None:
    """Test defaults for engine settings."""
    settings = Settings(_env_file=None)
    assert settings.route_engine_enabled is True
    assert settings.route_id_prefix == "r"
    assert settings.default_rank_sort == "upvotes"


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that environment variables override defaults."""
    monkeypatch.setenv("ROUTE_ENGINE_ENABLED", "false")
    monkeypatch.setenv("RNG_SEED", "17")

    settings = Settings(_env_file=None)

    assert settings.route_engine_enabled is False
    assert settings.rng_seed == 17


def test_unknown_rank_sort_rejected_at_load(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that an unsupported default sort field fails when settings load."""
    monkeypatch.setenv("DEFAULT_RANK_SORT", "popularity")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_rank_sort_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_RANK_SORT", "cost")

    assert Settings(_env_file=None).default_rank_sort == "cost"
