"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All settings overridable with SCRIPTOPS_* environment variables or a .env file
    - get_settings() is cached (lru_cache) — single instance per process
    - Paths are expanded (~) at validation time

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults point at the public Google endpoints and clasp's file names, so the
      tool works against an existing clasp checkout without configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTOPS_", env_file=".env", case_sensitive=False,
    )

    # Google endpoints
    script_api_url: str = "https://script.googleapis.com"
    service_usage_url: str = "https://serviceusage.googleapis.com"
    oauth_token_url: str = "https://oauth2.googleapis.com/token"
    registry_domain: str = "googleapis.com"
    http_timeout_seconds: float = 60.0

    # Local files
    clasprc_path: Path = Path("~/.clasprc.json")
    project_file: Path = Path(".clasp.json")

    @field_validator("clasprc_path", "project_file", mode="after")
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("script_api_url", "service_usage_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Observability
    log_level: str = "WARNING"
    log_format: Literal["text", "json"] = "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
