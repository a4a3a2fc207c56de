"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Coaching settings loaded from environment variables."""

    credit_required: int = Field(default=5, gt=0)
    default_daily_target: int = Field(default=2000, gt=0)
    goals_cache_ttl_seconds: int = Field(default=3600, ge=0)
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="NUTRITION_COACH_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
