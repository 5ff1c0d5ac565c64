"""
Intent classifier.

Asks the language model for a category label and collapses anything
outside the closed label set to unknown. Never raises.

Dependencies: docqa.boundary.interfaces
System role: Error boundary and first stage of the task agent
"""

import logging

from docqa.boundary.interfaces import LanguageModelProvider
from docqa.core.agentic_system.task_agent.intent_prompt import build_intent_prompt
from docqa.core.agentic_system.task_agent.task_agent_schema import Intent, IntentResult
from docqa.core.exceptions import describe_error
from docqa.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

KNOWN_LABELS = {intent.value: intent for intent in Intent}


class IntentClassifier:
    """Classify a query into one of the known intents."""

    def __init__(self, llm: LanguageModelProvider) -> None:
        self._llm = llm

    async def classify(self, query: str) -> IntentResult:
        """
        Classify a user query.

        Args:
            query: User query

        Returns:
            IntentResult: Known intent, or unknown paired with the error
                when the model call failed
        """
        try:
            raw = await self._llm.generate(build_intent_prompt(query))
        except Exception as e:
            logger.error(
                f"{__name__}:classify - Classification failed: {e}",
                extra={"query_preview": safe_log_value(query, max_length=50)},
            )
            return IntentResult(intent=Intent.UNKNOWN, error=describe_error(e))

        label = raw.strip() if isinstance(raw, str) else ""
        intent = KNOWN_LABELS.get(label, Intent.UNKNOWN)

        logger.info(
            f"{__name__}:classify - Intent: {intent.value}",
            extra={
                "query_preview": safe_log_value(query, max_length=50),
                "raw_label": safe_log_value(raw, max_length=50),
            },
        )
        return IntentResult(intent=intent)
