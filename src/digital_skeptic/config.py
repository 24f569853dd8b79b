"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `DIGITAL_SKEPTIC_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Digital Skeptic settings.

    All fields are environment-configurable. Prefix is `DIGITAL_SKEPTIC_`. The Gemini key
    is also accepted as plain `GOOGLE_AI_API_KEY`.
    """

    model_config = SettingsConfigDict(
        env_prefix="DIGITAL_SKEPTIC_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Core
    app_env: Literal["dev", "prod"] = Field(default="dev")
    log_level: str = Field(default="INFO")

    # LLM
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "DIGITAL_SKEPTIC_GEMINI_API_KEY", "GOOGLE_AI_API_KEY"),
    )
    gemini_base_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    gemini_model: str = Field(default="gemini-2.0-flash-lite")
    gemini_timeout_s: float = Field(default=60.0, ge=1.0, le=600.0)
    gemini_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    gemini_top_k: int = Field(default=40, ge=1)
    gemini_top_p: float = Field(default=0.95, ge=0.0, le=1.0)
    gemini_max_output_tokens: int = Field(default=2048, ge=1, le=65536)

    # Networking
    http_timeout_s: float = Field(default=30.0, ge=1.0, le=300.0)
    http_user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/91.0.4472.124 Safari/537.36"
        )
    )


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("DIGITAL_SKEPTIC_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
