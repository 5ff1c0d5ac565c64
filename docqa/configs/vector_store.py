"""
Vector store configuration settings.

Manages Pinecone (production) and FAISS (local development) settings
for vector storage and retrieval.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import BaseSettings


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (FAISS for dev, Pinecone for prod)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        populate_by_name=True,
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="pinecone",
        description="Vector store type: 'faiss' for local dev, 'pinecone' for production",
    )
    pinecone_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("VECTOR_STORE_PINECONE_API_KEY", "PINECONE_API_KEY"),
        description="Pinecone API key",
    )
    index_name: str = Field(default="rag-exercise-768", description="Vector index name")
    dimension: int = Field(
        default=768,
        gt=0,
        description="Configured vector dimension of the index",
    )
    upsert_batch_size: int = Field(
        default=100,
        gt=0,
        description="Records per upsert call (external service limit)",
    )
    top_k: int = Field(default=3, ge=1, le=100, description="Number of top results to retrieve")
    faiss_index_dir: str = Field(
        default="/tmp/.faiss_index",
        description="Directory where the local FAISS index is persisted",
    )
