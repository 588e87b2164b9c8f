"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) - single instance per process
    - snapshot_timestamp_format is never empty

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from photoalbum.core.domain_types import DEFAULT_TIMESTAMP_FORMAT


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Snapshots (strftime pattern; default renders as dd-MM-yyyy HH:mm:ss)
    snapshot_timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT

    @field_validator("snapshot_timestamp_format")
    @classmethod
    def require_timestamp_format(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("snapshot_timestamp_format cannot be empty")
        return v

    # Command endpoint
    max_script_lines: int = 10_000

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
