"""
Chunk domain model for document processing pipeline.

Represents a contiguous slice of a source document, ordered by position.

Dependencies: pydantic
System role: Data structure for document chunks in ingestion pipeline
"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Immutable document chunk."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="Position in the source document's chunk sequence")
    content: str = Field(description="Chunk text content")
    start_index: int = Field(ge=0, description="Character offset of the chunk in the source document")
