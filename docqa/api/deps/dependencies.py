"""
Dependency injection container.

Lazily builds and caches the provider adapters, pipeline stages and
services, and exposes them as FastAPI dependencies.

Dependencies: docqa.configs, docqa.application, docqa.boundary, docqa.core
System role: DI container for service injection
"""

import logging
from functools import lru_cache

from docqa.application.services import QueryService, StatsService
from docqa.configs import Settings, get_settings
from docqa.core.document_processing import DocumentPipeline

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self.clear()

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def embeddings(self):
        """Get cached LangChain embeddings client."""
        if self._embeddings is None:
            from docqa.boundary.llm import create_embeddings

            self._embeddings = create_embeddings(self.settings.llm)
        return self._embeddings

    @property
    def embedding_provider(self):
        if self._embedding_provider is None:
            from docqa.boundary.llm import LangChainEmbeddingProvider

            self._embedding_provider = LangChainEmbeddingProvider(self.embeddings)
        return self._embedding_provider

    @property
    def vector_store(self):
        """Get cached vector store."""
        if self._vector_store is None:
            from docqa.boundary.vdb.vector_store_factory import get_vector_store

            self._vector_store = get_vector_store(self.embeddings, self.settings)
        return self._vector_store

    @property
    def language_model(self):
        """Get cached chat model provider."""
        if self._language_model is None:
            from docqa.boundary.llm import ChatModelProvider, create_chat_model

            self._language_model = ChatModelProvider(create_chat_model(self.settings.llm))
        return self._language_model

    @property
    def db_engine(self):
        if self._db_engine is None:
            from docqa.boundary.db import get_async_engine

            self._db_engine = get_async_engine(self.settings.database)
        return self._db_engine

    @property
    def session_factory(self):
        if self._session_factory is None:
            from docqa.boundary.db import get_async_session_factory

            self._session_factory = get_async_session_factory(self.db_engine)
        return self._session_factory

    @property
    def counter(self):
        """Get cached query counter."""
        if self._counter is None:
            from docqa.boundary.stats.counter_service import SQLCounterService

            self._counter = SQLCounterService(self.session_factory)
        return self._counter

    @property
    def query_logger(self):
        """Get cached query log."""
        if self._query_logger is None:
            from docqa.boundary.stats.query_logger import SQLQueryLogger

            self._query_logger = SQLQueryLogger(self.session_factory)
        return self._query_logger

    @property
    def embedding_task(self):
        if self._embedding_task is None:
            from docqa.core.document_processing.tasks import EmbeddingTask

            self._embedding_task = EmbeddingTask(self.embedding_provider)
        return self._embedding_task

    @property
    def vector_index(self):
        if self._vector_index is None:
            from docqa.core.document_processing.tasks import VectorIndex
            from docqa.core.exceptions import DimensionMismatchError

            config = self.settings.vector_store
            if self.settings.llm.embedding_dimension != config.dimension:
                raise DimensionMismatchError(
                    "Embedding model dimension does not match the vector index dimension",
                    expected=config.dimension,
                    actual=self.settings.llm.embedding_dimension,
                )
            self._vector_index = VectorIndex(
                self.vector_store,
                dimension=config.dimension,
                batch_size=config.upsert_batch_size,
            )
        return self._vector_index

    @property
    def document_pipeline(self) -> DocumentPipeline:
        """Get cached document pipeline."""
        if self._document_pipeline is None:
            from docqa.core.document_processing.tasks import ChunkingTask

            self._document_pipeline = DocumentPipeline(
                chunking_task=ChunkingTask(
                    chunk_size=self.settings.pipeline.chunk_size,
                    chunk_overlap=self.settings.pipeline.chunk_overlap,
                ),
                embedding_task=self.embedding_task,
                vector_index=self.vector_index,
            )
        return self._document_pipeline

    @property
    def retriever(self):
        if self._retriever is None:
            from docqa.core.retriever import Retriever

            self._retriever = Retriever(
                self.embedding_task,
                self.vector_index,
                default_top_k=self.settings.vector_store.top_k,
            )
        return self._retriever

    @property
    def query_service(self) -> QueryService:
        """Get cached query service."""
        if self._query_service is None:
            from docqa.core.agentic_system.agent import AnswerGenerator
            from docqa.core.agentic_system.task_agent import IntentClassifier, ToolDispatcher

            dispatcher = ToolDispatcher(
                retriever=self.retriever,
                generator=AnswerGenerator(self.language_model),
                counter=self.counter,
            )
            self._query_service = QueryService(
                classifier=IntentClassifier(self.language_model),
                dispatcher=dispatcher,
                counter=self.counter,
                query_logger=self.query_logger,
            )
        return self._query_service

    @property
    def stats_service(self) -> StatsService:
        if self._stats_service is None:
            self._stats_service = StatsService(self.counter, self.query_logger)
        return self._stats_service

    async def init_db(self) -> None:
        """Create the counter and query log tables."""
        from docqa.boundary.db import init_models

        await init_models(self.db_engine)

    async def dispose(self) -> None:
        """Close the database engine and clear all cached instances."""
        if self._db_engine is not None:
            await self._db_engine.dispose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embeddings = None
        self._embedding_provider = None
        self._vector_store = None
        self._language_model = None
        self._db_engine = None
        self._session_factory = None
        self._counter = None
        self._query_logger = None
        self._embedding_task = None
        self._vector_index = None
        self._document_pipeline = None
        self._retriever = None
        self._query_service = None
        self._stats_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_document_pipeline() -> DocumentPipeline:
    """Get document indexing pipeline."""
    return get_service_cache().document_pipeline


def get_query_service() -> QueryService:
    """Get query orchestration service."""
    return get_service_cache().query_service


def get_stats_service() -> StatsService:
    """Get agent statistics service."""
    return get_service_cache().stats_service
