"""
Tests for PineconeVectorStore with a mocked index handle.

System role: Verification of the Pinecone adapter
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from docqa.boundary.vdb.pinecone_store import PineconeVectorStore
from docqa.boundary.vdb.vector_schemas import IndexedRecord, RecordMetadata


@pytest.fixture
def mock_index() -> MagicMock:
    index = MagicMock()
    index.upsert.return_value = SimpleNamespace(upserted_count=2)
    index.query.return_value = SimpleNamespace(
        matches=[
            SimpleNamespace(id="chunk_0_abc", score=0.91, metadata={"text": "Paris is the capital of France."}),
            SimpleNamespace(id="chunk_1_def", score=0.42, metadata=None),
        ]
    )
    return index


class TestPineconeVectorStore:
    """Test suite for PineconeVectorStore."""

    def test_init_without_key_or_index_should_raise(self) -> None:
        with pytest.raises(ValueError):
            PineconeVectorStore(index_name="rag-exercise-768")

    @pytest.mark.asyncio
    async def test_upsert_should_send_records_with_metadata(self, mock_index: MagicMock) -> None:
        store = PineconeVectorStore(index_name="test", index=mock_index)
        records = [
            IndexedRecord(id=f"chunk_{i}", values=[0.1, 0.2], metadata=RecordMetadata(text=f"text {i}"))
            for i in range(2)
        ]

        assert await store.upsert(records) == 2

        vectors = mock_index.upsert.call_args.kwargs["vectors"]
        assert [v["id"] for v in vectors] == ["chunk_0", "chunk_1"]
        assert vectors[0]["values"] == [0.1, 0.2]
        assert vectors[0]["metadata"]["text"] == "text 0"
        assert "indexed_at" in vectors[0]["metadata"]

    @pytest.mark.asyncio
    async def test_query_should_map_matches(self, mock_index: MagicMock) -> None:
        store = PineconeVectorStore(index_name="test", index=mock_index)

        matches = await store.query([0.1, 0.2], top_k=3)

        mock_index.query.assert_called_once_with(vector=[0.1, 0.2], top_k=3, include_metadata=True)
        assert [(m.id, m.score) for m in matches] == [("chunk_0_abc", 0.91), ("chunk_1_def", 0.42)]
        assert matches[0].metadata == {"text": "Paris is the capital of France."}
        assert matches[1].metadata == {}

    @pytest.mark.asyncio
    async def test_query_should_retry_transient_failure(self, mock_index: MagicMock) -> None:
        response = mock_index.query.return_value
        mock_index.query.side_effect = [ConnectionError("reset"), response]
        store = PineconeVectorStore(index_name="test", index=mock_index, max_query_attempts=2)

        matches = await store.query([0.1, 0.2], top_k=3)

        assert len(matches) == 2
        assert mock_index.query.call_count == 2

    @pytest.mark.asyncio
    async def test_query_should_raise_after_attempts_exhausted(self, mock_index: MagicMock) -> None:
        mock_index.query.side_effect = ConnectionError("down")
        store = PineconeVectorStore(index_name="test", index=mock_index, max_query_attempts=1)

        with pytest.raises(ConnectionError):
            await store.query([0.1, 0.2], top_k=3)
