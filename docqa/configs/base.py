"""
Shared settings base.

Every settings group reads the same `.env` file and shares the deployment
environment and log level defined here.

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

Environment = Literal["development", "test", "staging", "production"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BaseSettings(PydanticBaseSettings):
    """Environment-aware settings base."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Field(
        default="development",
        description="Deployment environment; production hides error details from API responses",
    )
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("environment", mode="before")
    @classmethod
    def _normalise_environment(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def expose_error_details(self) -> bool:
        """Whether API error bodies may include the underlying exception text."""
        return not self.is_production
