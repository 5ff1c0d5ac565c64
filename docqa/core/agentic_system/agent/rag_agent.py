"""
Grounded answer generator.

Answers a question from retrieved passages only, with numbered citations.

Dependencies: docqa.boundary.interfaces, langchain_core.prompts
System role: Generation stage of the RAG pipeline
"""

import logging
from collections.abc import Sequence

from docqa.boundary.interfaces import LanguageModelProvider
from docqa.core.agentic_system.agent.rag_agent_prompt import build_rag_prompt
from docqa.core.exceptions import DocQAException, LanguageModelError, NoContextError

logger = logging.getLogger(__name__)


class AnswerGenerator:
    """
    Grounded answer generator.

    Requires at least one context passage.
    """

    def __init__(self, llm: LanguageModelProvider) -> None:
        self._llm = llm

    async def generate(self, question: str, context: Sequence[str]) -> str:
        """
        Generate an answer citing the numbered context passages.

        Args:
            question: User question
            context: Retrieved passages, most relevant first

        Returns:
            str: Model answer

        Raises:
            NoContextError: When context is empty
            LanguageModelError: When the model call fails
        """
        if not context:
            raise NoContextError("Answer generation requires at least one context passage", field="context")

        prompt = build_rag_prompt(question, context)
        logger.info(
            f"{__name__}:generate - Generating answer",
            extra={"passage_count": len(context)},
        )

        try:
            answer = await self._llm.generate(prompt)
        except DocQAException:
            raise
        except Exception as e:
            logger.error(f"{__name__}:generate - Language model call failed: {e}")
            raise LanguageModelError(f"Failed to generate answer: {e}") from e

        logger.info(f"{__name__}:generate - Answer generated", extra={"answer_length": len(answer)})
        return answer
