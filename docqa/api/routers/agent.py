"""
Question answering and agent statistics API endpoints.

Routes:
- POST /api/answer-question - Intent-routed agent flow
- POST /api/search-knowledge-base - Direct retrieve-and-generate flow
- GET /api/agent-stats - Query counter and recent query log

Dependencies: docqa.application.services, docqa.models
System role: Query HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from docqa.api.deps import get_query_service, get_settings_dependency, get_stats_service
from docqa.application.services import QueryService, StatsService
from docqa.configs import Settings
from docqa.models.query import QueryResponse, QuestionRequest
from docqa.models.stats import AgentStatsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["agent"])


def _validate_question(question: str, settings: Settings) -> None:
    """
    Raises:
        HTTPException(400): Empty, whitespace-only or oversized question
    """
    if not question or not question.strip():
        raise HTTPException(status_code=400, detail="Question is required and cannot be empty.")
    max_chars = settings.api.max_question_chars
    if len(question) > max_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Question exceeds maximum length of {max_chars:,} characters.",
        )


@router.post("/answer-question", response_model=QueryResponse, response_model_exclude_none=True)
async def answer_question(
    request: QuestionRequest,
    query_service: QueryService = Depends(get_query_service),
    settings: Settings = Depends(get_settings_dependency),
) -> QueryResponse:
    """
    Answer a question through intent classification and tool dispatch.

    Failures inside the agent come back with success=false in the normal
    response shape.
    """
    _validate_question(request.question, settings)

    result = await query_service.answer_query(request.question)
    logger.info(
        f"{__name__}:answer_question - Served",
        extra={"intent": result.intent.value if result.intent else None, "success": result.success},
    )
    return QueryResponse.from_result(result, include_details=settings.expose_error_details)


@router.post("/search-knowledge-base", response_model=QueryResponse, response_model_exclude_none=True)
async def search_knowledge_base(
    request: QuestionRequest,
    query_service: QueryService = Depends(get_query_service),
    settings: Settings = Depends(get_settings_dependency),
) -> QueryResponse:
    """Answer a question by retrieval and generation, skipping intent classification."""
    _validate_question(request.question, settings)

    result = await query_service.answer_direct(request.question)
    return QueryResponse.from_result(result, include_details=settings.expose_error_details)


@router.get("/agent-stats", response_model=AgentStatsResponse)
async def agent_stats(
    stats_service: StatsService = Depends(get_stats_service),
) -> AgentStatsResponse:
    """Total query count and the most recent query log entries."""
    stats = await stats_service.get_stats()
    return AgentStatsResponse.from_stats(stats)
