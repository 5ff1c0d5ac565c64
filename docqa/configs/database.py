"""
Database configuration settings.

Manages the SQLAlchemy connection used by the query counter and query log.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """SQL database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(
        default="sqlite+aiosqlite:///./logs/docqa.db",
        description="SQLAlchemy async database URL",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")
