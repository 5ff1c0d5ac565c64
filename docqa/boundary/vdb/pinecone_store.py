"""
Pinecone vector store for production retrieval.

Stores (id, vector, metadata) records in a Pinecone index and serves
k-nearest-neighbour queries with Pinecone's native similarity score.

Dependencies: pinecone, tenacity, fastapi.concurrency
System role: Production vector store (Pinecone)
"""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi.concurrency import run_in_threadpool
from pinecone import Pinecone
from tenacity import retry, stop_after_attempt, wait_exponential_jitter

from docqa.boundary.interfaces import VectorStoreProvider
from docqa.boundary.vdb.vector_schemas import IndexedRecord, VectorMatch

logger = logging.getLogger(__name__)


class PineconeVectorStore(VectorStoreProvider):
    """
    Pinecone index adapter.

    The Pinecone SDK is synchronous, so every call is pushed to a worker
    thread. Queries are retried with exponential backoff; upserts are not,
    since a retried batch could hide a partially applied write from the caller.
    """

    def __init__(
        self,
        index_name: str,
        api_key: str | None = None,
        index: Any | None = None,
        max_query_attempts: int = 3,
    ) -> None:
        """
        Initialize Pinecone store.

        Args:
            index_name: Pinecone index name
            api_key: Pinecone API key (required unless index is given)
            index: Pre-built index handle (used by tests)
            max_query_attempts: Attempts per query before the error is raised

        Raises:
            ValueError: When neither api_key nor index is provided
        """
        if index is None:
            if not api_key:
                raise ValueError("api_key cannot be empty")
            index = Pinecone(api_key=api_key).Index(index_name)

        self._index_name = index_name
        self._index = index
        self._query_with_retry = retry(
            stop=stop_after_attempt(max_query_attempts),
            wait=wait_exponential_jitter(initial=1, max=10, jitter=1),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:query - Retry {retry_state.attempt_number}/{max_query_attempts}"
            ),
            reraise=True,
        )(self._query_index)

        logger.info(f"{__name__}:__init__ - Connected to Pinecone index={index_name}")

    async def upsert(self, records: Sequence[IndexedRecord]) -> int:
        """
        Upsert one batch of records.

        Args:
            records: Records to write (caller enforces batch size)

        Returns:
            int: Number of records Pinecone reports as upserted
        """
        vectors = [
            {
                "id": record.id,
                "values": list(record.values),
                "metadata": record.metadata.to_store(),
            }
            for record in records
        ]
        response = await run_in_threadpool(self._index.upsert, vectors=vectors)

        upserted = getattr(response, "upserted_count", None)
        if upserted is None:
            upserted = len(vectors)
        logger.info(
            f"{__name__}:upsert - Upserted {upserted} records",
            extra={"index": self._index_name},
        )
        return int(upserted)

    async def query(self, vector: Sequence[float], top_k: int) -> list[VectorMatch]:
        """
        Query nearest neighbours.

        Args:
            vector: Query embedding
            top_k: Maximum matches to return

        Returns:
            list[VectorMatch]: Matches with Pinecone's similarity score
        """
        response = await run_in_threadpool(self._query_with_retry, list(vector), top_k)

        matches = []
        for match in getattr(response, "matches", None) or []:
            matches.append(
                VectorMatch(
                    id=str(match.id),
                    score=float(match.score or 0.0),
                    metadata=dict(match.metadata or {}),
                )
            )
        logger.info(f"{__name__}:query - Retrieved {len(matches)} matches (top_k={top_k})")
        return matches

    def _query_index(self, vector: list[float], top_k: int) -> Any:
        return self._index.query(vector=vector, top_k=top_k, include_metadata=True)
