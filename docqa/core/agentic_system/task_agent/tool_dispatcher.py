"""
Tool dispatcher.

Maps each intent to the handler that runs the matching pipeline stage or
auxiliary tool. Never raises; failures become ErrorOutput.

Dependencies: docqa.core.retriever, docqa.core.agentic_system.agent
System role: Error boundary and execution stage of the task agent
"""

import logging
from collections.abc import Awaitable, Callable

from docqa.boundary.interfaces import CounterService
from docqa.core.agentic_system.agent.rag_agent import AnswerGenerator
from docqa.core.agentic_system.task_agent.task_agent_schema import (
    AnswerOutput,
    ErrorOutput,
    Intent,
    QueryCountOutput,
    SearchOutput,
    ToolOutput,
)
from docqa.core.exceptions import describe_error
from docqa.core.retriever import Retriever

logger = logging.getLogger(__name__)

NO_RELEVANT_INFORMATION = (
    "I couldn't find any relevant information in the document store to answer that question."
)
UNRECOGNIZED_REQUEST = "I don't understand that request."
DISPATCH_ERROR_PREFIX = "An error occurred while processing your request: "

Handler = Callable[[str], Awaitable[ToolOutput]]


class ToolDispatcher:
    """Run the tool that matches a classified intent."""

    def __init__(
        self,
        retriever: Retriever,
        generator: AnswerGenerator,
        counter: CounterService,
        top_k: int | None = None,
    ) -> None:
        """
        Initialize dispatcher.

        Args:
            retriever: Retrieval stage
            generator: Grounded answer generator
            counter: Shared query counter
            top_k: Retrieval depth (retriever default when None)
        """
        self._retriever = retriever
        self._generator = generator
        self._counter = counter
        self._top_k = top_k
        self._handlers: dict[Intent, Handler] = {
            Intent.ANSWER_QUESTION: self._answer_question,
            Intent.SEARCH_KNOWLEDGE_BASE: self._search_knowledge_base,
            Intent.GET_QUERY_COUNT: self._get_query_count,
            Intent.UNKNOWN: self._unknown,
        }

    async def dispatch(self, intent: Intent, query: str) -> ToolOutput:
        """
        Execute the handler for an intent.

        Args:
            intent: Classified intent
            query: Original user query

        Returns:
            ToolOutput: Handler output, or ErrorOutput on any failure
        """
        handler = self._handlers.get(intent, self._unknown)
        logger.info(f"{__name__}:dispatch - Executing tool for intent: {getattr(intent, 'value', intent)}")
        try:
            return await handler(query)
        except Exception as e:
            logger.error(
                f"{__name__}:dispatch - Tool execution failed: {e}",
                extra={"intent": str(getattr(intent, "value", intent)), "error_type": type(e).__name__},
            )
            return ErrorOutput(message=f"{DISPATCH_ERROR_PREFIX}{describe_error(e)}")

    async def answer(self, query: str) -> AnswerOutput:
        """
        Retrieve passages and generate a grounded answer.

        Skips generation when nothing is retrieved. Raises on failure.
        """
        results = await self._retriever.retrieve(query, self._top_k)
        if not results:
            return AnswerOutput(text=NO_RELEVANT_INFORMATION, chunks_retrieved=0)

        context = [result.content for result in results]
        text = await self._generator.generate(query, context)
        return AnswerOutput(text=text, chunks_retrieved=len(context), search_results=results)

    async def _answer_question(self, query: str) -> ToolOutput:
        return await self.answer(query)

    async def _search_knowledge_base(self, query: str) -> ToolOutput:
        results = await self._retriever.retrieve(query, self._top_k)
        return SearchOutput(query=query, results=results, result_count=len(results))

    async def _get_query_count(self, query: str) -> ToolOutput:
        count = await self._counter.increment()
        return QueryCountOutput(count=count)

    async def _unknown(self, query: str) -> ToolOutput:
        return ErrorOutput(message=UNRECOGNIZED_REQUEST)
