"""
Configuration helpers for the agency backend.

Routers and services read settings through ``get_settings()`` instead of
fetching ``os.environ`` directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_DATABASE_URL = "sqlite:///./fa_sl.db"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    port: int
    database_url: str
    log_level: str
    password_hash_time_cost: int
    password_hash_memory_cost: int
    request_timeout_seconds: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        port=_int(os.getenv("PORT", "3000"), 3000),
        database_url=(os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL).strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        password_hash_time_cost=_int(os.getenv("PASSWORD_HASH_TIME_COST", "3"), 3),
        password_hash_memory_cost=_int(os.getenv("PASSWORD_HASH_MEMORY_COST", "65536"), 65536),
        request_timeout_seconds=_int(os.getenv("REQUEST_TIMEOUT_SECONDS", "30"), 30),
    )
