"""
Unified application settings.

Each group reads its own env prefix (LLM_, VECTOR_STORE_, PIPELINE_,
DATABASE_, API_); Settings bundles them for dependency injection.

Dependencies: docqa.configs
System role: Central configuration aggregator for the application
"""

from functools import lru_cache
from typing import Any

from pydantic import Field

from docqa.configs.api import ApiSettings
from docqa.configs.base import BaseSettings
from docqa.configs.database import DatabaseSettings
from docqa.configs.llm import LLMSettings
from docqa.configs.pipeline import PipelineSettings
from docqa.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """All settings groups of the service."""

    llm: LLMSettings = Field(default_factory=LLMSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)

    def summary(self) -> dict[str, Any]:
        """Non-secret settings, logged once at startup."""
        return {
            "environment": self.environment,
            "store_type": self.vector_store.store_type,
            "index_name": self.vector_store.index_name,
            "index_dimension": self.vector_store.dimension,
            "embedding_model": self.llm.embedding_model,
            "embedding_dimension": self.llm.embedding_dimension,
            "chat_model": self.llm.chat_model,
            "chunk_size": self.pipeline.chunk_size,
            "chunk_overlap": self.pipeline.chunk_overlap,
            "top_k": self.vector_store.top_k,
        }


@lru_cache
def get_settings() -> Settings:
    """Settings loaded from the environment once per process."""
    return Settings()
