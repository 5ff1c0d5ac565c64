"""
Vector database schemas.

Pydantic models for vector operations (records, matches, results).
Used for type-safe vector store interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RecordMetadata(BaseModel):
    """Metadata attached to each indexed vector."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Chunk text, returned as SearchResult content")
    indexed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="UTC timestamp of indexing",
    )

    def to_store(self) -> dict[str, Any]:
        """Flatten into the primitive metadata types vector stores accept."""
        return {"text": self.text, "indexed_at": self.indexed_at.isoformat()}


class IndexedRecord(BaseModel):
    """Single (id, vector, metadata) record written to the vector index."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Globally unique record identifier")
    values: list[float] = Field(description="Embedding vector")
    metadata: RecordMetadata = Field(description="Record metadata")


class VectorMatch(BaseModel):
    """Raw match returned by a vector store provider."""

    id: str = Field(description="Record identifier")
    score: float = Field(description="Store-native similarity score (higher = more relevant)")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Stored metadata")


class SearchResult(BaseModel):
    """Single retrieval result handed to the agent layer."""

    chunk_id: str = Field(description="Chunk identifier")
    content: str = Field(description="Chunk text content")
    relevance_score: float = Field(description="Similarity score (higher = more relevant)")

