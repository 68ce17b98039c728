"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Request validation
    min_cities: int = 2
    max_trip_days: int = 60

    # All estimates are reported in one currency
    reporting_currency: str = "USD"

    # Leg timing (local hour)
    default_departure_hour: int = 9

    # Day window (local hours)
    day_start_hour: int = 9
    day_end_hour: int = 21
    latest_arrival_start_hour: int = 18

    # Arrival/departure trimming buffers (hours)
    arrival_buffer_hours: int = 2
    departure_buffer_hours: int = 2

    # Bus is not offered above this duration (minutes)
    bus_max_duration_minutes: int = 600

    # Leg search fan-out
    leg_search_timeout_ms: int = 4000
    fanout_cap: int = 4


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
