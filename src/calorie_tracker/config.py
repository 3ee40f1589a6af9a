"""Application configuration."""

import os
from datetime import UTC, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path.home() / ".calorie_tracker"
    records_slot: str = "dailyEntries"
    preferences_slot: str = "appPreferences"
    timezone: str = "UTC"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        env_prefix="CALORIE_TRACKER_",
        extra="ignore",
    )


def resolve_timezone(name: str | None) -> tzinfo:
    """Return the time zone used to decide calendar days."""
    if name is None:
        return UTC
    cleaned = name.strip()
    if cleaned in {"", "UTC"}:
        return UTC
    return ZoneInfo(cleaned)
