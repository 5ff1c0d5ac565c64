"""
Pipeline result model for document indexing.

Dependencies: pydantic
System role: Return type for DocumentPipeline.index_document()
"""

from pydantic import BaseModel, Field


class IndexResult(BaseModel):
    """Result of indexing one document."""

    chunk_count: int = Field(description="Number of chunks generated")
    record_count: int = Field(description="Number of records written to the vector index")
    duration_ms: int = Field(description="Total processing time in milliseconds")
