"""
Configuration helpers for the fitclub backend.

Settings are read from environment variables once and cached, so services and
repositories never touch os.environ directly.
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
    seed_demo_data: bool
    argon2_time_cost: int
    argon2_memory_cost: int
    argon2_parallelism: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///fitclub.db").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        seed_demo_data=_bool(os.getenv("SEED_DEMO_DATA"), False),
        argon2_time_cost=_int(os.getenv("ARGON2_TIME_COST"), 3),
        argon2_memory_cost=_int(os.getenv("ARGON2_MEMORY_COST"), 65536),
        argon2_parallelism=_int(os.getenv("ARGON2_PARALLELISM"), 4),
    )
