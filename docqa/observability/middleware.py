"""
FastAPI middleware for observability.

CorrelationMiddleware binds a correlation ID per request and echoes it in the
response; RequestLoggingMiddleware writes one log line per request.

Dependencies: fastapi, starlette, docqa.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from docqa.observability.correlation import correlation_scope
from docqa.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# Health probes are logged at DEBUG
QUIET_PATHS = frozenset({"/health"})


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Run each request inside a correlation scope."""

    async def dispatch(self, request: Request, call_next) -> Response:
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            response: Response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of every request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Time the request and log its outcome.

        Unhandled exceptions are logged with their traceback and re-raised
        for the application's exception handlers.
        """
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response: Response = await call_next(request)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{method} {path} - unhandled {type(e).__name__}",
                e,
                method=method,
                path=path,
                elapsed_ms=_elapsed_ms(start_time),
            )
            raise

        log_with_context(
            logger,
            logging.DEBUG if path in QUIET_PATHS else logging.INFO,
            f"{method} {path} - {response.status_code}",
            method=method,
            path=path,
            status_code=response.status_code,
            elapsed_ms=_elapsed_ms(start_time),
            client_host=request.client.host if request.client else None,
        )
        return response


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)
