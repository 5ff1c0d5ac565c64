"""
HTTP boundary configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Request bounds, CORS and server binding
"""

import json
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import NoDecode, SettingsConfigDict

from docqa.configs.base import BaseSettings


class ApiSettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="API_",
        case_sensitive=False,
        extra="ignore",
    )

    max_document_chars: int = Field(
        default=500_000,
        description="Maximum accepted document length in characters",
    )
    max_question_chars: int = Field(
        default=1_000,
        description="Maximum accepted question length in characters",
    )
    allowed_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        validation_alias=AliasChoices("API_ALLOWED_ORIGINS", "ALLOWED_ORIGINS"),
        description="CORS origins allowed in production (comma-separated or JSON list)",
    )
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=3000, description="Bind port")

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        if not isinstance(value, str):
            return value
        value = value.strip()
        if value.startswith("["):
            return json.loads(value)
        return [origin.strip() for origin in value.split(",") if origin.strip()]
