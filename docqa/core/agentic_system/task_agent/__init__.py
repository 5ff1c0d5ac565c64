"""
Task agent: classify intent, dispatch to a tool, compose the reply.

Dependencies: docqa.core.retriever, docqa.core.agentic_system.agent
System role: Query routing layer
"""

from docqa.core.agentic_system.task_agent.intent_classifier import IntentClassifier
from docqa.core.agentic_system.task_agent.response_composer import compose_response
from docqa.core.agentic_system.task_agent.task_agent_schema import (
    AnswerOutput,
    ErrorOutput,
    Intent,
    IntentResult,
    QueryCountOutput,
    SearchOutput,
    ToolOutput,
)
from docqa.core.agentic_system.task_agent.tool_dispatcher import (
    NO_RELEVANT_INFORMATION,
    UNRECOGNIZED_REQUEST,
    ToolDispatcher,
)

__all__ = [
    "IntentClassifier",
    "ToolDispatcher",
    "compose_response",
    "Intent",
    "IntentResult",
    "AnswerOutput",
    "SearchOutput",
    "QueryCountOutput",
    "ErrorOutput",
    "ToolOutput",
    "NO_RELEVANT_INFORMATION",
    "UNRECOGNIZED_REQUEST",
]
