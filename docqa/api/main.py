"""
FastAPI application with assembled routers.

Initializes FastAPI app with routers, middleware and JSON error handlers,
and configures uvicorn server.

Dependencies: fastapi, docqa.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from docqa.api.deps.dependencies import get_service_cache
from docqa.configs import Settings, get_settings
from docqa.models.common import ErrorResponse
from docqa.observability import configure_logging
from docqa.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import agent_router, documents_router, health_router

load_dotenv()
logger = logging.getLogger(__name__)

FIELD_LABELS = {"documentText": "Document text", "question": "Question"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Create the stats tables and build every service before serving.

    Missing API keys or a dimension mismatch between the embedding model and
    the vector index therefore fail at startup rather than on the first request.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"{__name__}:lifespan - Starting docqa", extra=settings.summary())

    cache = get_service_cache()
    await cache.init_db()
    _ = cache.document_pipeline
    _ = cache.query_service
    _ = cache.stats_service
    logger.info(f"{__name__}:lifespan - Services ready")

    yield

    await cache.dispose()
    logger.info(f"{__name__}:lifespan - Shut down")


def _error_body(error: str, details: str | None = None) -> dict:
    return ErrorResponse(error=error, details=details).model_dump(by_alias=True, exclude_none=True)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    loc = first.get("loc", ())
    field = loc[-1] if loc else None
    label = FIELD_LABELS.get(field) if isinstance(field, str) else None

    if label is None:
        return f"Invalid request: {first.get('msg', 'validation failed')}"
    if first.get("type") == "missing":
        return f"{label} is required."
    if first.get("type") == "string_type":
        return f"{label} must be a string."
    return f"{label} is invalid: {first.get('msg', 'validation failed')}"


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Render every error as a {error, success: false} JSON body."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content=_error_body(_validation_message(exc)))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content=_error_body("Endpoint not found"))
        return JSONResponse(status_code=exc.status_code, content=_error_body(str(exc.detail)))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"{__name__}:unhandled_exception_handler - Unhandled error: {exc}",
            exc_info=exc,
            extra={"path": request.url.path},
        )
        details = str(exc) if settings.expose_error_details else None
        return JSONResponse(status_code=500, content=_error_body("Internal server error", details))


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Application settings (loaded from environment if None)

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="docqa",
        description="Grounded question answering over a private document collection",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS: open in development, configured origins in production
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allowed_origins if settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app, settings)

    app.include_router(health_router)
    app.include_router(documents_router)
    app.include_router(agent_router)

    return app


app = create_app()


def main() -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "docqa.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
    )


if __name__ == "__main__":
    main()
