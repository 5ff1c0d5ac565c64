"""
Document processing pipeline for indexing.

Chunks document text, embeds the chunks and upserts them into the vector index.

Dependencies: langchain_text_splitters, pydantic
System role: Document ingestion pipeline entrypoint
"""

from .entrypoint import DocumentPipeline
from .models import Chunk, IndexResult
from .tasks import ChunkingTask, EmbeddingTask, VectorIndex

__all__ = [
    "DocumentPipeline",
    "Chunk",
    "IndexResult",
    "ChunkingTask",
    "EmbeddingTask",
    "VectorIndex",
]
