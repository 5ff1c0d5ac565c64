"""
Task agent schemas.

Closed intent enumeration and the tagged tool output variants passed from
the dispatcher to the response composer.

Dependencies: pydantic
System role: Task agent type definitions
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from docqa.boundary.vdb.vector_schemas import SearchResult


class Intent(str, Enum):
    """Closed set of user intents."""

    ANSWER_QUESTION = "answer_question"
    SEARCH_KNOWLEDGE_BASE = "search_knowledge_base"
    GET_QUERY_COUNT = "get_query_count"
    UNKNOWN = "unknown"


class IntentResult(BaseModel):
    """Classified intent plus the diagnostic error when classification failed."""

    intent: Intent = Field(description="Classified intent")
    error: str | None = Field(default=None, description="Classification error, if any")


class AnswerOutput(BaseModel):
    """Grounded answer produced from retrieved passages."""

    type: Literal["answer"] = "answer"
    text: str = Field(description="Generated answer")
    chunks_retrieved: int = Field(default=0, description="Passages used as context")
    search_results: list[SearchResult] = Field(default_factory=list)


class SearchOutput(BaseModel):
    """Raw retrieval results."""

    type: Literal["search"] = "search"
    query: str = Field(description="Search query")
    results: list[SearchResult] = Field(default_factory=list)
    result_count: int = Field(default=0, description="Number of results")


class QueryCountOutput(BaseModel):
    """Counter value after incrementing."""

    type: Literal["query_count"] = "query_count"
    count: int = Field(description="Total queries processed")


class ErrorOutput(BaseModel):
    """User-facing error message."""

    type: Literal["error"] = "error"
    message: str = Field(description="Error message")


ToolOutput = Annotated[
    AnswerOutput | SearchOutput | QueryCountOutput | ErrorOutput,
    Field(discriminator="type"),
]
