"""
Request correlation IDs.

Each HTTP request runs with a correlation ID held in a ContextVar, so log
records emitted anywhere while serving it carry the same ID. Worker threads
started with run_in_threadpool copy the context and see it too.

Dependencies: contextvars, logging (stdlib)
System role: Request tracing across service boundaries
"""

import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

MAX_CORRELATION_ID_LENGTH = 128

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def new_correlation_id() -> str:
    return uuid.uuid4().hex


def get_correlation_id() -> str:
    """Correlation ID of the current request ("" outside a request)."""
    return _correlation_id.get()


@contextmanager
def correlation_scope(incoming: str | None = None) -> Iterator[str]:
    """
    Bind a correlation ID for the duration of the block.

    An incoming ID is reused when it is non-empty and no longer than
    MAX_CORRELATION_ID_LENGTH; otherwise a fresh one is generated.

    Args:
        incoming: ID supplied by the caller (request header)

    Yields:
        str: The bound correlation ID
    """
    incoming = (incoming or "").strip()
    value = incoming if 0 < len(incoming) <= MAX_CORRELATION_ID_LENGTH else new_correlation_id()
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)


class CorrelationIdFilter(logging.Filter):
    """Stamp every record with the current correlation ID ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True
