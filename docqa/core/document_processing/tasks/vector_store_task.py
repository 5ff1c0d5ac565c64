"""
Vector index task.

Writes records to a VectorStoreProvider in sequential fixed-size batches
and turns provider matches into ordered search results.

Dependencies: docqa.boundary.interfaces, docqa.boundary.vdb
System role: Final stage of document ingestion pipeline, search stage of retrieval
"""

import logging
from collections.abc import Sequence

from docqa.boundary.interfaces import VectorStoreProvider
from docqa.boundary.vdb.vector_schemas import IndexedRecord, SearchResult
from docqa.core.exceptions import (
    DimensionMismatchError,
    DocQAException,
    PartialUpsertError,
    ValidationError,
    VectorStoreError,
)

logger = logging.getLogger(__name__)


class VectorIndex:
    """Batched upsert and k-nearest-neighbour query over a vector store."""

    def __init__(
        self,
        provider: VectorStoreProvider,
        dimension: int,
        batch_size: int = 100,
    ) -> None:
        """
        Initialize the index.

        Args:
            provider: Vector store provider
            dimension: Configured vector dimension; every record and query must match
            batch_size: Records per upsert call

        Raises:
            ValueError: When dimension or batch_size is not positive
        """
        if dimension <= 0:
            raise ValueError("dimension must be positive")
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")

        self._provider = provider
        self.dimension = dimension
        self.batch_size = batch_size

    def _check_dimension(self, vector: Sequence[float], record_id: str | None = None) -> None:
        if len(vector) != self.dimension:
            raise DimensionMismatchError(
                "Vector dimension does not match the index dimension",
                expected=self.dimension,
                actual=len(vector),
                details={"record_id": record_id} if record_id else None,
            )

    async def upsert(self, records: Sequence[IndexedRecord]) -> int:
        """
        Write records in sequential batches.

        Batches already written stay written when a later batch fails.

        Args:
            records: Records to write

        Returns:
            int: Number of records written

        Raises:
            DimensionMismatchError: When any record has the wrong dimension (nothing is sent)
            PartialUpsertError: When a batch fails; carries the count already written
        """
        if not records:
            return 0

        for record in records:
            self._check_dimension(record.values, record.id)

        total = len(records)
        inserted = 0
        for start in range(0, total, self.batch_size):
            batch = records[start : start + self.batch_size]
            try:
                await self._provider.upsert(batch)
            except Exception as e:
                logger.error(
                    f"{__name__}:upsert - Batch starting at {start} failed: {e}",
                    extra={"inserted": inserted, "total": total},
                )
                raise PartialUpsertError(
                    f"Upsert failed after {inserted} of {total} records: {e}",
                    inserted=inserted,
                    total=total,
                ) from e
            inserted += len(batch)
            logger.debug(
                f"{__name__}:upsert - Upserted batch {start // self.batch_size + 1}",
                extra={"batch_size": len(batch), "inserted": inserted, "total": total},
            )

        return inserted

    async def query(self, vector: Sequence[float], top_k: int) -> list[SearchResult]:
        """
        Nearest-neighbour search.

        Args:
            vector: Query vector
            top_k: Maximum number of results

        Returns:
            list[SearchResult]: At most top_k results, highest score first;
                empty when the index holds no data

        Raises:
            ValidationError: When top_k is not positive
            DimensionMismatchError: When the query vector has the wrong dimension
            VectorStoreError: When the provider call fails
        """
        if top_k <= 0:
            raise ValidationError("top_k must be positive", field="top_k")
        self._check_dimension(vector)

        try:
            matches = await self._provider.query(list(vector), top_k)
        except DocQAException:
            raise
        except Exception as e:
            logger.error(f"{__name__}:query - Vector store query failed: {e}")
            raise VectorStoreError(f"Vector store query failed: {e}", operation="query") from e

        results = [
            SearchResult(
                chunk_id=match.id,
                content=match.metadata["text"],
                relevance_score=match.score,
            )
            for match in matches
            if isinstance(match.metadata.get("text"), str) and match.metadata["text"]
        ]
        results.sort(key=lambda r: r.relevance_score, reverse=True)
        return results[:top_k]
