"""
repokit.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the repository layer.
- Make query defaults (limit, projection) and conventional column names explicit.
- Offer a cached settings instance for repositories that are not given one.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ALL_COLUMNS: tuple[str, ...] = ("*",)


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `REPOKIT_`):
    - Defaults safe for local dev
    - One settings object shared by every repository
    """

    model_config = SettingsConfigDict(env_prefix="REPOKIT_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "repokit"
    log_level: str = "INFO"

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./repokit.db"
    echo_sql: bool = False

    # Query defaults
    default_limit: int = Field(default=10, gt=0)
    default_columns: tuple[str, ...] = ALL_COLUMNS

    # Conventional column names
    code_column: str = "code"
    slug_column: str = "slug"
    soft_delete_column: str = "deleted_at"

    @field_validator("default_columns")
    @classmethod
    def _columns_not_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("default_columns must name at least one column or '*'")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for every repository instance.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly and pass it to repositories instead of
# mutating the cached instance.
