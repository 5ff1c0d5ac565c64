"""
Embedding generation task.

Maps chunk texts and queries to vectors through an EmbeddingProvider and
checks the shape of what comes back.

Dependencies: docqa.boundary.interfaces
System role: Second stage of document ingestion pipeline, first stage of retrieval
"""

import logging
from collections.abc import Sequence

from docqa.boundary.interfaces import EmbeddingProvider
from docqa.core.exceptions import (
    DimensionMismatchError,
    DocQAException,
    EmbeddingServiceError,
    EmptyEmbeddingError,
    EmptyInputError,
)

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Generate embeddings through an embedding provider."""

    def __init__(self, provider: EmbeddingProvider) -> None:
        self._provider = provider

    async def embed(self, texts: Sequence[str]) -> list[list[float]]:
        """
        Generate embeddings for a batch of texts.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float]]: One vector per text, same order, same dimension

        Raises:
            EmptyInputError: When texts is empty
            EmbeddingServiceError: When the provider call fails
            EmptyEmbeddingError: When no vectors or a zero-length vector come back
            DimensionMismatchError: When vector count or dimensions disagree
        """
        if not texts:
            raise EmptyInputError("No texts to embed", field="texts")

        try:
            vectors = await self._provider.embed_documents(list(texts))
        except DocQAException:
            raise
        except Exception as e:
            logger.error(f"{__name__}:embed - Embedding call failed: {e}")
            raise EmbeddingServiceError(
                f"Failed to generate embeddings: {e}",
                details={"text_count": len(texts)},
            ) from e

        if not vectors:
            raise EmptyEmbeddingError("Embedding service returned no vectors")
        if len(vectors) != len(texts):
            raise DimensionMismatchError(
                "Embedding count does not match text count",
                expected=len(texts),
                actual=len(vectors),
            )

        dimension = len(vectors[0])
        for i, vector in enumerate(vectors):
            if not vector:
                raise EmptyEmbeddingError(
                    "Embedding service returned a zero-length vector",
                    details={"position": i},
                )
            if len(vector) != dimension:
                raise DimensionMismatchError(
                    "Embedding vectors have mixed dimensions",
                    expected=dimension,
                    actual=len(vector),
                    details={"position": i},
                )

        logger.debug(
            f"{__name__}:embed - Generated {len(vectors)} embeddings",
            extra={"dimension": dimension},
        )
        return [list(v) for v in vectors]

    async def embed_query(self, text: str) -> list[float]:
        """
        Generate the embedding for a single query.

        Raises:
            EmptyInputError: When text is empty or whitespace-only
            EmbeddingServiceError: When the provider call fails
            EmptyEmbeddingError: When a zero-length vector comes back
        """
        if not text or not text.strip():
            raise EmptyInputError("Cannot embed an empty query", field="text")

        try:
            vector = await self._provider.embed_query(text)
        except DocQAException:
            raise
        except Exception as e:
            logger.error(f"{__name__}:embed_query - Embedding call failed: {e}")
            raise EmbeddingServiceError(f"Failed to embed query: {e}") from e

        if not vector:
            raise EmptyEmbeddingError("Embedding service returned a zero-length query vector")
        return list(vector)
