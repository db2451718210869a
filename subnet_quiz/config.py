"""
Configuration settings for subnet-quiz.

Uses Pydantic Settings for environment variable management with .env file support.
Every field can be overridden with a SUBNET_QUIZ_ prefixed variable, e.g.
SUBNET_QUIZ_MAX_STRIKES=5.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SUBNET_QUIZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Quiz
    # ========================================
    question_count: int = Field(
        default=10,
        ge=1,
        description="Questions per quiz run",
    )
    max_strikes: int = Field(
        default=3,
        ge=1,
        description="Wrong answers allowed before elimination",
    )
    show_explanations: bool = Field(
        default=True,
        description="Show the worked solution after each answer",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
