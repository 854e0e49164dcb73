"""
Configuration helpers for the ski station backend.

Settings are read once from environment variables and cached, so that
routers/services/db helpers never fetch os.environ directly. Tests clear
the cache after patching the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    sql_echo: bool
    log_level: str
    auto_create_tables: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./skistation.db").strip(),
        sql_echo=_bool(os.getenv("SQL_ECHO"), False),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        auto_create_tables=_bool(os.getenv("AUTO_CREATE_TABLES"), True),
    )
