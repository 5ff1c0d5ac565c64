"""
Tests for AnswerGenerator and the grounded answer prompt.

System role: Verification of grounded generation
"""

from unittest.mock import AsyncMock

import pytest

from conftest import ScriptedLanguageModel
from docqa.core.agentic_system.agent.rag_agent import AnswerGenerator
from docqa.core.agentic_system.agent.rag_agent_prompt import build_rag_prompt, format_context
from docqa.core.exceptions import LanguageModelError, NoContextError, UpstreamError


class TestRagPrompt:
    """Test suite for grounded prompt rendering."""

    def test_format_context_should_number_passages_from_one(self) -> None:
        assert format_context(["first", "second"]) == "[1] first\n\n[2] second"

    def test_prompt_should_ground_and_request_citations(self) -> None:
        prompt = build_rag_prompt("What is the capital?", ["Paris is the capital of France."])

        assert "ONLY the provided context" in prompt
        assert "state that clearly" in prompt
        assert "Question: What is the capital?" in prompt
        assert "[1] Paris is the capital of France." in prompt
        assert prompt.rstrip().endswith("Answer with citations (e.g., [1], [2]):")

    def test_prompt_should_keep_braces_in_passages(self) -> None:
        prompt = build_rag_prompt("q", ["json {\"a\": 1}"])

        assert "[1] json {\"a\": 1}" in prompt


class TestAnswerGenerator:
    """Test suite for AnswerGenerator.generate."""

    @pytest.mark.asyncio
    async def test_generate_without_context_should_raise(self) -> None:
        llm = ScriptedLanguageModel("should not be called")

        with pytest.raises(NoContextError):
            await AnswerGenerator(llm).generate("What is the capital of France?", [])

        assert llm.prompts == []

    @pytest.mark.asyncio
    async def test_generate_should_return_model_text(self) -> None:
        llm = ScriptedLanguageModel("Paris [1].")

        answer = await AnswerGenerator(llm).generate("Capital?", ["Paris is the capital of France."])

        assert answer == "Paris [1]."
        assert "[1] Paris is the capital of France." in llm.prompts[0]

    @pytest.mark.asyncio
    async def test_generate_should_wrap_model_failure(self) -> None:
        llm = AsyncMock()
        llm.generate = AsyncMock(side_effect=RuntimeError("503 overloaded"))

        with pytest.raises(LanguageModelError) as exc_info:
            await AnswerGenerator(llm).generate("q", ["context"])

        assert isinstance(exc_info.value, UpstreamError)
