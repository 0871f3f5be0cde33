"""
Application settings loaded from environment variables.

Uses pydantic-settings to validate and type-cast env vars at startup.
Mapper option defaults live here so a deployment can change the default
delimiter or line ending without touching stream definitions.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralised application configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TEXTMAPPER_",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ───────────────────────────────────────────────────
    app_name: str = "textmapper"
    app_env: Literal["development", "staging", "production"] = "development"
    app_debug: bool = False
    app_version: str = "1.0.0"

    # ── Logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    # ── Mapper option defaults ────────────────────────────────────────
    event_grouping_enabled: bool = False
    event_delimiter: str = "~~~~~~~~~~"
    new_line_character: str = "\n"

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Cached singleton: settings are read once and reused.
    """
    return Settings()
