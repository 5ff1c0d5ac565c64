"""
Document pipeline orchestrator.

Coordinates chunking, embedding and vector index upsert for one document.

Dependencies: All task modules
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time
import uuid

from docqa.boundary.vdb.vector_schemas import IndexedRecord, RecordMetadata
from docqa.core.exceptions import DimensionMismatchError

from .models import Chunk, IndexResult
from .tasks import ChunkingTask, EmbeddingTask, VectorIndex

logger = logging.getLogger(__name__)


def make_record_id(chunk_index: int) -> str:
    """Globally unique record id for a chunk position."""
    return f"chunk_{chunk_index}_{uuid.uuid4().hex}"


class DocumentPipeline:
    """Orchestrate document indexing: chunk -> embed -> upsert."""

    def __init__(
        self,
        chunking_task: ChunkingTask,
        embedding_task: EmbeddingTask,
        vector_index: VectorIndex,
    ) -> None:
        self._chunking_task = chunking_task
        self._embedding_task = embedding_task
        self._vector_index = vector_index

    async def index_document(self, text: str) -> IndexResult:
        """
        Index a document.

        Args:
            text: Full document text

        Returns:
            IndexResult: Chunk and record counts with timing

        Raises:
            EmptyInputError: Document is empty or whitespace-only
            EmbeddingServiceError: Embedding call failed
            EmptyEmbeddingError: Embedding call returned nothing usable
            DimensionMismatchError: Chunk, vector and record counts disagree,
                or vectors do not match the index dimension
            PartialUpsertError: Upsert failed partway through
        """
        start_time = time.perf_counter()

        logger.info(
            f"{__name__}:index_document - Step 1: Chunking document",
            extra={"text_length": len(text)},
        )
        chunks = self._chunking_task.split(text)

        logger.info(f"{__name__}:index_document - Step 2: Embedding {len(chunks)} chunks")
        vectors = await self._embedding_task.embed([chunk.content for chunk in chunks])
        if len(vectors) != len(chunks):
            raise DimensionMismatchError(
                "Vector count does not match chunk count",
                expected=len(chunks),
                actual=len(vectors),
            )

        records = self._build_records(chunks, vectors)

        logger.info(f"{__name__}:index_document - Step 3: Upserting {len(records)} records")
        record_count = await self._vector_index.upsert(records)
        if record_count != len(chunks):
            raise DimensionMismatchError(
                "Upserted record count does not match chunk count",
                expected=len(chunks),
                actual=record_count,
            )

        elapsed_ms = int((time.perf_counter() - start_time) * 1000)
        logger.info(
            f"{__name__}:index_document - Complete",
            extra={"chunk_count": len(chunks), "duration_ms": elapsed_ms},
        )
        return IndexResult(
            chunk_count=len(chunks),
            record_count=record_count,
            duration_ms=elapsed_ms,
        )

    @staticmethod
    def _build_records(chunks: list[Chunk], vectors: list[list[float]]) -> list[IndexedRecord]:
        return [
            IndexedRecord(
                id=make_record_id(chunk.index),
                values=vector,
                metadata=RecordMetadata(text=chunk.content),
            )
            for chunk, vector in zip(chunks, vectors)
        ]
