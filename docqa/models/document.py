"""
Document indexing API models.

Dependencies: pydantic
System role: Request/response schemas for POST /api/index-document
"""

from pydantic import Field

from docqa.models.common import CamelModel


class IndexDocumentRequest(CamelModel):
    """Raw document text to index."""

    document_text: str = Field(description="Full document text")


class IndexDocumentResponse(CamelModel):
    """Indexing outcome."""

    message: str
    success: bool = True
    chunk_count: int = Field(description="Chunks generated")
    record_count: int = Field(description="Records written to the vector index")
    duration: int = Field(description="Processing time in milliseconds")
