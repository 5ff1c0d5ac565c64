"""FastAPI dependency providers."""

from docqa.api.deps.dependencies import (
    ServiceCache,
    get_document_pipeline,
    get_query_service,
    get_service_cache,
    get_settings_dependency,
    get_stats_service,
)

__all__ = [
    "ServiceCache",
    "get_document_pipeline",
    "get_query_service",
    "get_service_cache",
    "get_settings_dependency",
    "get_stats_service",
]
