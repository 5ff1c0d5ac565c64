"""
Tests for FAISSVectorsStore.

System role: Verification of the local vector store
"""

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding

from docqa.boundary.vdb.faiss_vectors_store import FAISSVectorsStore
from docqa.boundary.vdb.vector_schemas import IndexedRecord, RecordMetadata
from docqa.core.exceptions import DimensionMismatchError

DIMENSION = 4


def record(record_id: str, values: list[float], text: str) -> IndexedRecord:
    return IndexedRecord(id=record_id, values=values, metadata=RecordMetadata(text=text))


@pytest.fixture
def embeddings() -> DeterministicFakeEmbedding:
    return DeterministicFakeEmbedding(size=DIMENSION)


@pytest.fixture
def records() -> list[IndexedRecord]:
    return [
        record("chunk_0", [1.0, 0.0, 0.0, 0.0], "about cats"),
        record("chunk_1", [0.0, 1.0, 0.0, 0.0], "about dogs"),
        record("chunk_2", [0.7, 0.7, 0.0, 0.0], "about pets"),
    ]


class TestFAISSVectorsStore:
    """Test suite for FAISSVectorsStore."""

    @pytest.mark.asyncio
    async def test_query_empty_index_should_return_no_matches(self, embeddings) -> None:
        store = FAISSVectorsStore(dimension=DIMENSION, embeddings=embeddings)

        assert await store.query([1.0, 0.0, 0.0, 0.0], top_k=3) == []

    @pytest.mark.asyncio
    async def test_query_should_rank_by_cosine_similarity(self, embeddings, records) -> None:
        store = FAISSVectorsStore(dimension=DIMENSION, embeddings=embeddings)

        assert await store.upsert(records) == 3
        matches = await store.query([2.0, 0.1, 0.0, 0.0], top_k=2)

        assert [m.id for m in matches] == ["chunk_0", "chunk_2"]
        assert matches[0].metadata["text"] == "about cats"
        assert "indexed_at" in matches[0].metadata
        assert 0.9 < matches[0].score <= 1.0001
        assert matches[0].score >= matches[1].score

    @pytest.mark.asyncio
    async def test_index_should_persist_to_disk(self, embeddings, records, tmp_path) -> None:
        store = FAISSVectorsStore(dimension=DIMENSION, embeddings=embeddings, index_dir=str(tmp_path))
        await store.upsert(records)

        reloaded = FAISSVectorsStore(dimension=DIMENSION, embeddings=embeddings, index_dir=str(tmp_path))
        matches = await reloaded.query([0.0, 1.0, 0.0, 0.0], top_k=1)

        assert [m.id for m in matches] == ["chunk_1"]

    @pytest.mark.asyncio
    async def test_persisted_index_with_other_dimension_should_fail(self, embeddings, records, tmp_path) -> None:
        store = FAISSVectorsStore(dimension=DIMENSION, embeddings=embeddings, index_dir=str(tmp_path))
        await store.upsert(records)

        with pytest.raises(DimensionMismatchError):
            FAISSVectorsStore(dimension=DIMENSION * 2, embeddings=embeddings, index_dir=str(tmp_path))
