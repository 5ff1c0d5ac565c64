"""
Language model configuration settings.

Manages Google Gemini credentials and model identifiers for both
embedding generation and answer/intent generation.

Dependencies: pydantic, pydantic_settings
System role: LLM and embedding model configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import BaseSettings


class LLMSettings(BaseSettings):
    """Google Gemini model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        populate_by_name=True,
        case_sensitive=False,
        extra="ignore",
    )

    google_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("LLM_GOOGLE_API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY"),
        description="Google Generative AI API key",
    )
    embedding_model: str = Field(
        default="models/text-embedding-004",
        description="Google embedding model ID",
    )
    embedding_dimension: int = Field(
        default=768,
        description="Embedding vector dimension (must match the vector index)",
    )
    chat_model: str = Field(
        default="gemini-2.5-flash",
        description="Gemini chat model used for intent analysis and answers",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Model temperature (0.0 for deterministic)",
    )
