"""
API request and response models.

Field names are snake_case in Python and camelCase on the wire.
"""

from docqa.models.common import ErrorResponse
from docqa.models.document import IndexDocumentRequest, IndexDocumentResponse
from docqa.models.health import HealthResponse
from docqa.models.query import QuestionRequest, QueryResponse, SearchResultItem
from docqa.models.stats import AgentStatsResponse, QueryLogItem

__all__ = [
    "ErrorResponse",
    "IndexDocumentRequest",
    "IndexDocumentResponse",
    "HealthResponse",
    "QuestionRequest",
    "QueryResponse",
    "SearchResultItem",
    "AgentStatsResponse",
    "QueryLogItem",
]
