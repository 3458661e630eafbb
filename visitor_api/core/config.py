"""
Configuration helpers for the visitor API.

Settings are read once from the process environment; the connection string is
the only required value.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


class ConfigurationError(RuntimeError):
    """Raised at startup when a required setting is missing."""


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    log_level: str
    cors_allowed_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _csv(value: str | None) -> tuple[str, ...]:
        if not value:
            return ()
        return tuple(item.strip().rstrip("/") for item in value.split(",") if item.strip())

    database_url = os.getenv("POSTGRESQL_CONNECTION_STRING") or os.getenv("DATABASE_URL") or ""
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=database_url.strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_allowed_origins=_csv(os.getenv("CORS_ALLOWED_ORIGINS")),
    )


def require_database_url(settings: Settings) -> str:
    """Return the connection string or fail; the app must not start without a store."""
    url = (settings.database_url or "").strip()
    if not url:
        raise ConfigurationError("POSTGRESQL_CONNECTION_STRING environment variable is not set")
    return url
