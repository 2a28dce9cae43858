"""Application configuration."""

import os
from pathlib import Path
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = "low"
    openai_store: bool = False
    openai_timeout_seconds: float = 60.0
    ai_retry_attempts: int = 1
    storage_backend: Literal["file", "supabase"] = "file"
    data_dir: Path = Path(".nutrition_planner")
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    timezone: str = "UTC"
    demo_weight_trend: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value!r}") from exc
        return value
