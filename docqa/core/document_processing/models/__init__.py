"""
Models for document processing pipeline.

Exports: Chunk, IndexResult
"""

from .chunk import Chunk
from .pipeline_result import IndexResult

__all__ = [
    "Chunk",
    "IndexResult",
]
