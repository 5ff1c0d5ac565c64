"""
Tests for Retriever and the index-then-query round trip.

System role: Verification of RAG retrieval
"""

from unittest.mock import AsyncMock

import pytest

from docqa.core.exceptions import InvalidQueryError
from docqa.core.retriever import Retriever

MARKER = "Zebra quantum 7781 zebra quantum 7781."


@pytest.fixture
def marker_document() -> str:
    filler_a = ("alpha beta gamma delta epsilon " * 16).strip()
    filler_b = ("one two three four five " * 20).strip()
    return f"{filler_a}\n\n{MARKER}\n\n{filler_b}"


class TestRetriever:
    """Test suite for Retriever.retrieve."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", "   ", "\n\t"])
    async def test_retrieve_should_reject_empty_query(self, query: str) -> None:
        embedding_task = AsyncMock()
        retriever = Retriever(embedding_task, AsyncMock(), default_top_k=3)

        with pytest.raises(InvalidQueryError):
            await retriever.retrieve(query)

        embedding_task.embed_query.assert_not_called()

    @pytest.mark.asyncio
    async def test_retrieve_should_use_default_top_k(self) -> None:
        embedding_task = AsyncMock()
        embedding_task.embed_query = AsyncMock(return_value=[0.1, 0.2])
        vector_index = AsyncMock()
        vector_index.query = AsyncMock(return_value=[])
        retriever = Retriever(embedding_task, vector_index, default_top_k=3)

        await retriever.retrieve("question")
        await retriever.retrieve("question", top_k=7)

        assert [call.args for call in vector_index.query.await_args_list] == [
            ([0.1, 0.2], 3),
            ([0.1, 0.2], 7),
        ]

    @pytest.mark.asyncio
    async def test_retrieve_on_empty_index_should_return_empty(self, retriever) -> None:
        assert await retriever.retrieve("anything at all") == []

    @pytest.mark.asyncio
    async def test_indexed_marker_should_be_retrieved_first(
        self, document_pipeline, retriever, marker_document: str
    ) -> None:
        result = await document_pipeline.index_document(marker_document)
        assert result.chunk_count == 3

        results = await retriever.retrieve("zebra quantum 7781")

        assert results
        assert "7781" in results[0].content
        scores = [r.relevance_score for r in results]
        assert scores == sorted(scores, reverse=True)
        assert len(results) <= 3
