"""
Health check API endpoint.

Routes: GET /health

Dependencies: docqa.configs
System role: Health check HTTP API
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from docqa.api.deps import get_settings_dependency
from docqa.configs import Settings
from docqa.models.health import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings_dependency)) -> HealthResponse:
    """Basic health check."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
    )
