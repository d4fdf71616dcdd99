"""Library Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings never influence how a system is classified
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - ANTIFRAGILE_ prefix: the library lives inside host applications' environments
    - Defaults provided for every setting: works out-of-the-box with no .env
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ANTIFRAGILE_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Serialization toggle (schemas/ entry points)
    serialization_enabled: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        """Only the JSON and plain-text formatters exist."""
        fmt = v.lower()
        if fmt not in ("json", "text"):
            raise ValueError(f"log_format must be 'json' or 'text', got {v!r}")
        return fmt


@lru_cache
def get_settings() -> Settings:
    return Settings()
