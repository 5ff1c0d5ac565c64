"""
Test suite for the dependency injection container.

Builds the full service graph from settings with the Google clients
replaced by LangChain fakes.

System role: Verification of DI container
"""

from unittest.mock import patch

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from docqa.api.deps.dependencies import ServiceCache
from docqa.application.services import QueryService, StatsService
from docqa.boundary.vdb.faiss_vectors_store import FAISSVectorsStore
from docqa.configs import Settings
from docqa.configs.database import DatabaseSettings
from docqa.configs.llm import LLMSettings
from docqa.configs.vector_store import VectorStoreSettings
from docqa.core.document_processing import DocumentPipeline
from docqa.core.exceptions import DimensionMismatchError

DIMENSION = 8


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        llm=LLMSettings(google_api_key="test-key", embedding_dimension=DIMENSION),
        vector_store=VectorStoreSettings(
            store_type="faiss",
            dimension=DIMENSION,
            faiss_index_dir=str(tmp_path / "faiss"),
        ),
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path}/stats.db"),
    )


@pytest.fixture
def fake_clients():
    with patch(
        "docqa.boundary.llm.create_embeddings",
        return_value=DeterministicFakeEmbedding(size=DIMENSION),
    ), patch(
        "docqa.boundary.llm.create_chat_model",
        return_value=FakeListChatModel(responses=["get_query_count"]),
    ):
        yield


class TestServiceCache:
    """Test suite for ServiceCache."""

    def test_services_should_be_built_and_cached(self, settings, fake_clients) -> None:
        cache = ServiceCache(settings)

        assert isinstance(cache.document_pipeline, DocumentPipeline)
        assert isinstance(cache.query_service, QueryService)
        assert isinstance(cache.stats_service, StatsService)
        assert isinstance(cache.vector_store, FAISSVectorsStore)
        assert cache.query_service is cache.query_service
        assert cache.counter is cache.counter

    def test_clear_should_drop_cached_instances(self, settings, fake_clients) -> None:
        cache = ServiceCache(settings)
        pipeline = cache.document_pipeline

        cache.clear()

        assert cache.document_pipeline is not pipeline

    def test_dimension_mismatch_should_fail_at_build(self, settings, fake_clients) -> None:
        settings.llm.embedding_dimension = DIMENSION * 2
        cache = ServiceCache(settings)

        with pytest.raises(DimensionMismatchError):
            _ = cache.document_pipeline

    @pytest.mark.asyncio
    async def test_end_to_end_query_count(self, settings, fake_clients) -> None:
        cache = ServiceCache(settings)
        await cache.init_db()
        try:
            result = await cache.query_service.answer_query("How many queries so far?")
            stats = await cache.stats_service.get_stats()
        finally:
            await cache.dispose()

        assert result.query_count == 1
        assert stats.total_queries == 1
        assert stats.query_logs[0].query == "How many queries so far?"
