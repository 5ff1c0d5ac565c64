"""
Provider interfaces - capability abstractions for external collaborators.

The pipeline depends only on these abstractions so that embedding vendors,
vector stores, language models and stats stores can be swapped (or faked in
tests) without touching pipeline logic.

Dependencies: abc, docqa.boundary.vdb.vector_schemas
System role: Dependency inversion seam between core and boundary
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from docqa.boundary.stats.schemas import QueryLogEntry
from docqa.boundary.vdb.vector_schemas import IndexedRecord, VectorMatch


class EmbeddingProvider(ABC):
    """Maps text to fixed-dimension vectors via an external embedding service."""

    @abstractmethod
    async def embed_documents(self, texts: Sequence[str]) -> list[list[float]]:
        """Embed a batch of document chunks, preserving order."""
        pass

    @abstractmethod
    async def embed_query(self, text: str) -> list[float]:
        """Embed a single query string."""
        pass


class VectorStoreProvider(ABC):
    """Similarity search service over (id, vector, metadata) records."""

    @abstractmethod
    async def upsert(self, records: Sequence[IndexedRecord]) -> int:
        """
        Insert or overwrite one batch of records.

        Returns:
            int: Number of records written
        """
        pass

    @abstractmethod
    async def query(self, vector: Sequence[float], top_k: int) -> list[VectorMatch]:
        """Return up to top_k nearest matches with their native similarity score."""
        pass


class LanguageModelProvider(ABC):
    """Text-in, text-out language model."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Generate a completion for the prompt."""
        pass


class CounterService(ABC):
    """Shared query counter with atomic increment semantics."""

    @abstractmethod
    async def increment(self) -> int:
        """Atomically increment the counter and return the new value."""
        pass

    @abstractmethod
    async def current(self) -> int:
        """Return the current value without incrementing."""
        pass


class QueryLogger(ABC):
    """Best-effort append-only log of answered queries."""

    @abstractmethod
    async def record(
        self,
        query: str,
        answer: str,
        chunks_retrieved: int,
        duration_ms: int,
    ) -> None:
        """Append one query log entry."""
        pass

    @abstractmethod
    async def recent(self, limit: int = 50) -> list[QueryLogEntry]:
        """Return the most recent entries, newest first."""
        pass
