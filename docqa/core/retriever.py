"""
Retrieval logic.

Embeds a query and searches the vector index. Score ordering from the
index is authoritative; no re-ranking happens here.

Dependencies: docqa.core.document_processing.tasks, docqa.core.exceptions
System role: RAG retrieval business logic
"""

import logging

from docqa.boundary.vdb.vector_schemas import SearchResult
from docqa.core.document_processing.tasks import EmbeddingTask, VectorIndex
from docqa.core.exceptions import InvalidQueryError
from docqa.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


class Retriever:
    """Retrieval business logic."""

    def __init__(
        self,
        embedding_task: EmbeddingTask,
        vector_index: VectorIndex,
        default_top_k: int = 3,
    ) -> None:
        """
        Initialize retriever.

        Args:
            embedding_task: Query embedder
            vector_index: Vector index to search
            default_top_k: Result count when the caller does not pass one
        """
        self._embedding_task = embedding_task
        self._vector_index = vector_index
        self.default_top_k = default_top_k

    async def retrieve(self, query: str, top_k: int | None = None) -> list[SearchResult]:
        """
        Retrieve relevant chunks.

        Args:
            query: User query
            top_k: Maximum number of results (defaults to default_top_k)

        Returns:
            list[SearchResult]: Retrieved chunks, highest relevance first

        Raises:
            InvalidQueryError: When the query is empty or whitespace-only
            EmbeddingServiceError: When embedding the query fails
            VectorStoreError: When the index query fails
        """
        if not query or not query.strip():
            raise InvalidQueryError("Query must not be empty", field="query")

        k = top_k if top_k is not None else self.default_top_k
        logger.info(
            f"{__name__}:retrieve - Step 1: Embedding query",
            extra={"query_preview": safe_log_value(query, max_length=50), "top_k": k},
        )
        vector = await self._embedding_task.embed_query(query)

        logger.info(f"{__name__}:retrieve - Step 2: Querying vector index")
        results = await self._vector_index.query(vector, k)

        logger.info(f"{__name__}:retrieve - Found {len(results)} results")
        return results
