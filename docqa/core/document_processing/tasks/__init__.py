"""
Task modules for document processing pipeline.

Exports: ChunkingTask, EmbeddingTask, VectorIndex
"""

from .chunking_task import ChunkingTask
from .embedding_task import EmbeddingTask
from .vector_store_task import VectorIndex

__all__ = [
    "ChunkingTask",
    "EmbeddingTask",
    "VectorIndex",
]
