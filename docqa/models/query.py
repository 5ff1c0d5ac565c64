"""
Query API models.

Dependencies: pydantic, docqa.application.services
System role: Request/response schemas for the question endpoints
"""

from pydantic import Field

from docqa.application.services.query_service import QueryResult
from docqa.boundary.vdb.vector_schemas import SearchResult
from docqa.models.common import CamelModel


class QuestionRequest(CamelModel):
    """User question."""

    question: str = Field(description="Natural-language question")


class SearchResultItem(CamelModel):
    """Retrieved chunk as returned to clients."""

    chunk_id: str
    content: str
    relevance_score: float

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResultItem":
        return cls(
            chunk_id=result.chunk_id,
            content=result.content,
            relevance_score=result.relevance_score,
        )


class QueryResponse(CamelModel):
    """
    Answer to a question.

    Only the fields that apply to the served intent are populated;
    unset fields are omitted from the JSON body.
    """

    answer: str
    success: bool
    duration: int = Field(description="Processing time in milliseconds")
    chunks_retrieved: int | None = None
    search_results: list[SearchResultItem] | None = None
    result_count: int | None = None
    query_count: int | None = None
    error: str | None = None
    details: str | None = None

    @classmethod
    def from_result(cls, result: QueryResult, include_details: bool) -> "QueryResponse":
        """
        Build the response body from a service result.

        Args:
            result: Query service result
            include_details: Whether underlying error details may be exposed
        """
        return cls(
            answer=result.answer,
            success=result.success,
            duration=result.duration_ms,
            chunks_retrieved=result.chunks_retrieved,
            search_results=(
                [SearchResultItem.from_result(r) for r in result.search_results]
                if result.search_results is not None
                else None
            ),
            result_count=result.result_count,
            query_count=result.query_count,
            error=result.error,
            details=result.details if include_details else None,
        )
