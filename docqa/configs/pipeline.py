"""
Configuration settings for the document indexing pipeline.

Dependencies: pydantic, pydantic_settings
System role: Chunking configuration
"""

from pydantic import Field, model_validator
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import BaseSettings


class PipelineSettings(BaseSettings):
    """Settings for document chunking."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PIPELINE_",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(
        default=500,
        gt=0,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=100,
        gt=0,
        description="Overlap between consecutive chunks",
    )

    @model_validator(mode="after")
    def _overlap_below_size(self) -> "PipelineSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")
        return self
