"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All settings come from PROMPT_ENHANCER_* environment variables or .env
    - get_settings() is cached (lru_cache), single instance per process
    - Prompt length bounds are part of the public contract, not settings

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env support
    - Defaults for every field: the MCP server works with no environment at all
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PROMPT_ENHANCER_", env_file=".env", case_sensitive=False,
    )

    # Service identity (MCP server info, health probe)
    service_name: str = "prompt-enhancer-mcp"
    service_version: str = "1.0.0"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
