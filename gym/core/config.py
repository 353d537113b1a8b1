"""
Configuration helpers for the gym backend.

Settings are read once from environment variables so that services and the CLI
do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    log_level: str
    sql_echo: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or "sqlite:///gym.db").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "WARNING").strip().upper(),
        sql_echo=_bool(os.getenv("SQL_ECHO"), False),
    )
