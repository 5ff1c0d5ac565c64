"""
Document indexing API endpoint.

Routes:
- POST /api/index-document - Chunk, embed and index raw document text

Dependencies: docqa.core.document_processing, docqa.models
System role: Document HTTP API
"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from docqa.api.deps import get_document_pipeline, get_settings_dependency
from docqa.configs import Settings
from docqa.core.document_processing import DocumentPipeline
from docqa.models.common import ErrorResponse
from docqa.models.document import IndexDocumentRequest, IndexDocumentResponse
from docqa.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["documents"])

INDEX_FAILURE_MESSAGE = "Failed to index document. Please try again."


@router.post("/index-document", response_model=IndexDocumentResponse, response_model_exclude_none=True)
async def index_document(
    request: IndexDocumentRequest,
    pipeline: DocumentPipeline = Depends(get_document_pipeline),
    settings: Settings = Depends(get_settings_dependency),
):
    """
    Index a document into the vector store.

    Args:
        request: Document text
        pipeline: Injected indexing pipeline
        settings: Injected settings

    Returns:
        IndexDocumentResponse: Chunk and record counts

    Raises:
        HTTPException(400): Empty or oversized document
    """
    text = request.document_text
    max_chars = settings.api.max_document_chars
    if not text:
        raise HTTPException(status_code=400, detail="Document text is required.")
    if len(text) > max_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Document text exceeds maximum length of {max_chars:,} characters.",
        )

    start_time = time.perf_counter()
    try:
        result = await pipeline.index_document(text)
    except Exception as e:
        duration = int((time.perf_counter() - start_time) * 1000)
        logger.exception(
            f"{__name__}:index_document - Indexing failed",
            extra={"text_length": len(text), "error": str(e)},
        )
        body = ErrorResponse(
            error=INDEX_FAILURE_MESSAGE,
            details=str(e) if settings.expose_error_details else None,
            duration=duration,
        )
        return JSONResponse(status_code=500, content=body.model_dump(by_alias=True, exclude_none=True))

    log_with_context(
        logger,
        logging.INFO,
        f"{__name__}:index_document - Indexed document",
        text_length=len(text),
        chunk_count=result.chunk_count,
        duration_ms=result.duration_ms,
    )
    return IndexDocumentResponse(
        message=f"Document successfully indexed with {result.chunk_count} chunks.",
        chunk_count=result.chunk_count,
        record_count=result.record_count,
        duration=result.duration_ms,
    )
