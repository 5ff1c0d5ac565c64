"""
Query service.

Orchestrates the two query flows exposed over HTTP:
- answer_query: classify intent -> dispatch tool -> compose reply -> log
- answer_direct: count -> retrieve -> generate -> log (no classification)

Dependencies: docqa.core.agentic_system, docqa.boundary.interfaces
System role: Query orchestration layer
"""

import logging
import time

from pydantic import BaseModel, Field

from docqa.boundary.interfaces import CounterService, QueryLogger
from docqa.boundary.vdb.vector_schemas import SearchResult
from docqa.core.agentic_system.task_agent import (
    AnswerOutput,
    ErrorOutput,
    Intent,
    IntentClassifier,
    QueryCountOutput,
    SearchOutput,
    ToolDispatcher,
    compose_response,
)
from docqa.core.exceptions import DocQAException, describe_error
from docqa.observability.log_utils import log_exception_with_context, safe_log_value

logger = logging.getLogger(__name__)

INTENT_FAILURE_MESSAGE = "Failed to understand your request."
DIRECT_FAILURE_MESSAGE = "Failed to answer the question. Please try again."


class QueryResult(BaseModel):
    """Outcome of one query, in the shape returned to HTTP callers."""

    answer: str = Field(description="Composed reply text")
    success: bool = Field(description="False when the query could not be served")
    intent: Intent | None = Field(default=None, description="Classified intent")
    chunks_retrieved: int | None = Field(default=None)
    search_results: list[SearchResult] | None = Field(default=None)
    result_count: int | None = Field(default=None)
    query_count: int | None = Field(default=None)
    error: str | None = Field(default=None, description="User-facing error message")
    details: str | None = Field(default=None, description="Underlying error detail")
    duration_ms: int = Field(default=0)


class QueryService:
    """
    Query orchestration.

    Query log writes are best effort: a failing logger is reported in the
    application log and never fails the query.
    """

    def __init__(
        self,
        classifier: IntentClassifier,
        dispatcher: ToolDispatcher,
        counter: CounterService,
        query_logger: QueryLogger,
    ) -> None:
        self._classifier = classifier
        self._dispatcher = dispatcher
        self._counter = counter
        self._query_logger = query_logger

    async def answer_query(self, text: str) -> QueryResult:
        """
        Answer a query through the intent-routing agent.

        Flow:
        1. Classify intent
        2. Dispatch to the matching tool
        3. Compose the reply
        4. Record the query log entry

        Args:
            text: User query

        Returns:
            QueryResult: success is False for unknown intents, tool errors,
                and classification failures
        """
        start_time = time.perf_counter()
        logger.info(
            f"{__name__}:answer_query - Step 1: Classifying intent",
            extra={"query_preview": safe_log_value(text, max_length=50)},
        )
        intent_result = await self._classifier.classify(text)

        if intent_result.error is not None:
            duration_ms = _elapsed_ms(start_time)
            logger.warning(f"{__name__}:answer_query - Intent analysis failed: {intent_result.error}")
            await self._record(text, f"Error: {INTENT_FAILURE_MESSAGE}", 0, duration_ms)
            return QueryResult(
                answer=INTENT_FAILURE_MESSAGE,
                success=False,
                intent=intent_result.intent,
                error=INTENT_FAILURE_MESSAGE,
                details=intent_result.error,
                duration_ms=duration_ms,
            )

        logger.info(f"{__name__}:answer_query - Step 2: Dispatching intent {intent_result.intent.value}")
        tool_output = await self._dispatcher.dispatch(intent_result.intent, text)

        logger.info(f"{__name__}:answer_query - Step 3: Composing response ({tool_output.type})")
        answer = compose_response(tool_output)
        duration_ms = _elapsed_ms(start_time)

        result = QueryResult(
            answer=answer,
            success=not isinstance(tool_output, ErrorOutput),
            intent=intent_result.intent,
            duration_ms=duration_ms,
        )
        if isinstance(tool_output, AnswerOutput):
            result.chunks_retrieved = tool_output.chunks_retrieved
        elif isinstance(tool_output, SearchOutput):
            result.search_results = tool_output.results
            result.result_count = tool_output.result_count
        elif isinstance(tool_output, QueryCountOutput):
            result.query_count = tool_output.count
        else:
            result.error = answer

        logger.info(f"{__name__}:answer_query - Step 4: Recording query log")
        if result.success:
            await self._record(text, answer, result.chunks_retrieved or 0, duration_ms)
        else:
            await self._record(text, f"Error: {answer}", 0, duration_ms)

        return result

    async def answer_direct(self, text: str) -> QueryResult:
        """
        Answer a question with retrieval and generation only.

        Increments the query counter, skips intent classification.

        Args:
            text: User question

        Returns:
            QueryResult: success is False when a pipeline stage failed

        Raises:
            Exception: Anything outside the application exception hierarchy,
                after it has been recorded in the query log
        """
        start_time = time.perf_counter()
        try:
            count = await self._counter.increment()
            logger.info(f"{__name__}:answer_direct - Query count incremented to {count}")
            output = await self._dispatcher.answer(text)
        except Exception as e:
            duration_ms = _elapsed_ms(start_time)
            message = describe_error(e)
            log_exception_with_context(
                logger,
                f"{__name__}:answer_direct - Query failed",
                e,
                query=text,
            )
            await self._record(text, f"Error: {message}", 0, duration_ms)
            if not isinstance(e, DocQAException):
                raise
            return QueryResult(
                answer=DIRECT_FAILURE_MESSAGE,
                success=False,
                intent=Intent.ANSWER_QUESTION,
                error=DIRECT_FAILURE_MESSAGE,
                details=message,
                duration_ms=duration_ms,
            )

        duration_ms = _elapsed_ms(start_time)
        await self._record(text, output.text, output.chunks_retrieved, duration_ms)
        return QueryResult(
            answer=output.text,
            success=True,
            intent=Intent.ANSWER_QUESTION,
            chunks_retrieved=output.chunks_retrieved,
            duration_ms=duration_ms,
        )

    async def _record(self, query: str, answer: str, chunks_retrieved: int, duration_ms: int) -> None:
        try:
            await self._query_logger.record(query, answer, chunks_retrieved, duration_ms)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_record - Failed to log query",
                e,
                query=query,
            )


def _elapsed_ms(start_time: float) -> int:
    return int((time.perf_counter() - start_time) * 1000)
