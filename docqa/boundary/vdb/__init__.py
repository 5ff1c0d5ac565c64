"""
Vector database boundary layer.

Provides vector store providers for storage and retrieval operations.
- PineconeVectorStore: Production Pinecone index
- FAISSVectorsStore: Local development index

Dependencies: pinecone, langchain_community, faiss
System role: Vector store adapter for RAG retrieval
"""

from docqa.boundary.vdb.vector_schemas import (
    IndexedRecord,
    RecordMetadata,
    SearchResult,
    VectorMatch,
)

__all__ = [
    "IndexedRecord",
    "RecordMetadata",
    "SearchResult",
    "VectorMatch",
]
