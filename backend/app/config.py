"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.app.db.queries import SortField


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Route engine toggle (disabled engine surfaces as 503)
    route_engine_enabled: bool = True

    # Simulated upstream latency (milliseconds)
    simulated_latency_min_ms: int = 800
    simulated_latency_max_ms: int = 2000

    # Reproducibility; None seeds from OS entropy
    rng_seed: int | None = None

    # Route identifiers
    route_id_prefix: str = "r"

    # Ranking
    default_rank_sort: SortField = "upvotes"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
