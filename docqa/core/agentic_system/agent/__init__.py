"""Grounded answer generation."""

from docqa.core.agentic_system.agent.rag_agent import AnswerGenerator
from docqa.core.agentic_system.agent.rag_agent_prompt import build_rag_prompt, format_context

__all__ = ["AnswerGenerator", "build_rag_prompt", "format_context"]
