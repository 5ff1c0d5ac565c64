"""
Exception hierarchy for the docqa application.

Pipeline stages raise these upward; the task agent and the HTTP boundary
decide what reaches the user. Keyword context passed to any exception
(field, operation, expected, ...) is collected into `details` for logs.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DocQAException(Exception):
    """
    Base exception for all docqa application errors.

    Attributes:
        message: Human-readable error message
        details: Structured context (None-valued keywords are dropped)
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        **context: Any,
    ) -> None:
        self.message = message
        self.details = dict(details or {})
        self.details.update({key: value for key, value in context.items() if value is not None})
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ============================================================================
# Validation errors: bad or empty input reaching a component
# ============================================================================


class ValidationError(DocQAException):
    """Input rejected by a component; pass field= to name the offending argument."""


class EmptyInputError(ValidationError):
    """Document, text batch or query text is empty or whitespace-only."""


class InvalidQueryError(ValidationError):
    """Retrieval query is empty or whitespace-only."""


class NoContextError(ValidationError):
    """Answer generation was requested without any context passages."""


# ============================================================================
# Upstream errors: embedding service, vector store, language model
# ============================================================================


class UpstreamError(DocQAException):
    """
    Call to an external service failed.

    Subclasses set `service`; it is recorded in details automatically.
    """

    service: str | None = None

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        **context: Any,
    ) -> None:
        context.setdefault("service", self.service)
        super().__init__(message, details, **context)


class EmbeddingServiceError(UpstreamError):
    service = "embedding"


class VectorStoreError(UpstreamError):
    """Vector store upsert or query failed; pass operation= to name which."""

    service = "vector_store"


class PartialUpsertError(VectorStoreError):
    """
    Upsert failed after some batches were already written.

    Written batches are not rolled back.

    Attributes:
        inserted: Records durably written before the failure
        total: Records in the whole request
    """

    def __init__(
        self,
        message: str,
        inserted: int,
        total: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.inserted = inserted
        self.total = total
        super().__init__(message, details, operation="upsert", inserted=inserted, total=total)


class LanguageModelError(UpstreamError):
    service = "language_model"


# ============================================================================
# Result errors
# ============================================================================


class EmptyResultError(DocQAException):
    """A pipeline stage produced nothing usable."""


class EmptyEmbeddingError(EmptyResultError):
    """Embedding service returned no vectors or a zero-length vector."""


class DimensionMismatchError(DocQAException):
    """
    Chunk, vector and record counts or vector dimensions disagree.

    Always fatal for the request. Pass expected= and actual= for the log.
    """


def describe_error(exc: BaseException) -> str:
    """
    Non-empty text for an exception.

    Prefers the application message, then str(exc), then the class name
    for exceptions raised without arguments (e.g. asyncio.TimeoutError()).
    """
    return getattr(exc, "message", None) or str(exc) or type(exc).__name__
