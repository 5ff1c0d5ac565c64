"""
Shared test fixtures and configuration for entire test suite.

Provides: Deterministic fakes for every provider interface, in-memory
SQLite session factory, pipeline and service assemblies
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import hashlib
import math
import re
from collections.abc import Callable, Sequence

import pytest

from docqa.boundary.interfaces import (
    EmbeddingProvider,
    LanguageModelProvider,
    VectorStoreProvider,
)
from docqa.boundary.stats.counter_service import InMemoryCounterService
from docqa.boundary.stats.query_logger import InMemoryQueryLogger
from docqa.boundary.vdb.vector_schemas import IndexedRecord, VectorMatch

TEST_DIMENSION = 64

WORD_PATTERN = re.compile(r"\w+")


# ============================================================================
# Provider fakes
# ============================================================================


class HashingEmbeddingProvider(EmbeddingProvider):
    """Bag-of-words embedder: each word hashes to one bucket, result is L2-normalised."""

    def __init__(self, dimension: int = TEST_DIMENSION) -> None:
        self.dimension = dimension
        self.document_calls: list[list[str]] = []
        self.query_calls: list[str] = []

    def _vector(self, text: str) -> list[float]:
        values = [0.0] * self.dimension
        for word in WORD_PATTERN.findall(text.lower()):
            bucket = int(hashlib.md5(word.encode()).hexdigest(), 16) % self.dimension
            values[bucket] += 1.0
        norm = math.sqrt(sum(v * v for v in values))
        if norm == 0:
            # Non-word text still gets a usable vector
            values[0] = 1.0
            return values
        return [v / norm for v in values]

    async def embed_documents(self, texts: Sequence[str]) -> list[list[float]]:
        self.document_calls.append(list(texts))
        return [self._vector(text) for text in texts]

    async def embed_query(self, text: str) -> list[float]:
        self.query_calls.append(text)
        return self._vector(text)


class InMemoryVectorStore(VectorStoreProvider):
    """Cosine-similarity store keyed by record id."""

    def __init__(self, fail_on_upsert_call: int | None = None) -> None:
        self.records: dict[str, IndexedRecord] = {}
        self.upsert_calls: list[int] = []
        self._fail_on_upsert_call = fail_on_upsert_call

    async def upsert(self, records: Sequence[IndexedRecord]) -> int:
        self.upsert_calls.append(len(records))
        if self._fail_on_upsert_call is not None and len(self.upsert_calls) == self._fail_on_upsert_call:
            raise ConnectionError("vector store unavailable")
        for record in records:
            self.records[record.id] = record
        return len(records)

    async def query(self, vector: Sequence[float], top_k: int) -> list[VectorMatch]:
        scored = [
            VectorMatch(
                id=record.id,
                score=_cosine(vector, record.values),
                metadata=record.metadata.to_store(),
            )
            for record in self.records.values()
        ]
        scored.sort(key=lambda m: m.score, reverse=True)
        return scored[:top_k]


class ScriptedLanguageModel(LanguageModelProvider):
    """Replies from a callable of the prompt; records every prompt."""

    def __init__(self, reply: Callable[[str], str] | str) -> None:
        self._reply = reply if callable(reply) else (lambda prompt: reply)
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self._reply(prompt)

    @property
    def intent_prompts(self) -> list[str]:
        return [p for p in self.prompts if p.startswith("Classify")]

    @property
    def answer_prompts(self) -> list[str]:
        return [p for p in self.prompts if not p.startswith("Classify")]


def agent_model(intent: str, answer: str = "") -> ScriptedLanguageModel:
    """Language model that classifies every query as intent and answers with answer."""
    return ScriptedLanguageModel(lambda prompt: intent if prompt.startswith("Classify") else answer)


def _cosine(a: Sequence[float], b: Sequence[float]) -> float:
    dot = sum(x * y for x, y in zip(a, b))
    norm_a = math.sqrt(sum(x * x for x in a))
    norm_b = math.sqrt(sum(y * y for y in b))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return dot / (norm_a * norm_b)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def embedding_provider() -> HashingEmbeddingProvider:
    return HashingEmbeddingProvider()


@pytest.fixture
def vector_store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


@pytest.fixture
def counter() -> InMemoryCounterService:
    return InMemoryCounterService()


@pytest.fixture
def query_logger() -> InMemoryQueryLogger:
    return InMemoryQueryLogger()


@pytest.fixture
def embedding_task(embedding_provider):
    from docqa.core.document_processing.tasks import EmbeddingTask

    return EmbeddingTask(embedding_provider)


@pytest.fixture
def vector_index(vector_store):
    from docqa.core.document_processing.tasks import VectorIndex

    return VectorIndex(vector_store, dimension=TEST_DIMENSION, batch_size=100)


@pytest.fixture
def document_pipeline(embedding_task, vector_index):
    from docqa.core.document_processing import ChunkingTask, DocumentPipeline

    return DocumentPipeline(
        chunking_task=ChunkingTask(chunk_size=500, chunk_overlap=100),
        embedding_task=embedding_task,
        vector_index=vector_index,
    )


@pytest.fixture
def retriever(embedding_task, vector_index):
    from docqa.core.retriever import Retriever

    return Retriever(embedding_task, vector_index, default_top_k=3)


@pytest.fixture
def build_query_service(retriever, counter, query_logger):
    """Factory assembling a QueryService around a given language model."""
    from docqa.application.services import QueryService
    from docqa.core.agentic_system.agent import AnswerGenerator
    from docqa.core.agentic_system.task_agent import IntentClassifier, ToolDispatcher

    def _build(llm: LanguageModelProvider) -> QueryService:
        dispatcher = ToolDispatcher(
            retriever=retriever,
            generator=AnswerGenerator(llm),
            counter=counter,
        )
        return QueryService(
            classifier=IntentClassifier(llm),
            dispatcher=dispatcher,
            counter=counter,
            query_logger=query_logger,
        )

    return _build


@pytest.fixture
async def session_factory():
    """
    In-memory SQLite session factory with all tables created.

    Yields:
        async_sessionmaker: Session factory bound to a fresh database
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from docqa.boundary.db import get_async_session_factory, init_models

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_models(engine)

    yield get_async_session_factory(engine)

    await engine.dispose()


@pytest.fixture
def make_agent_model():
    """Factory for a language model with a fixed intent label and answer."""
    return agent_model


@pytest.fixture
def make_client(document_pipeline, build_query_service, counter, query_logger):
    """
    Factory for a TestClient whose dependencies resolve to the in-memory fakes.

    The application lifespan is not entered, so no real providers or
    database are created.
    """
    from fastapi.testclient import TestClient

    from docqa.api.deps import (
        get_document_pipeline,
        get_query_service,
        get_settings_dependency,
        get_stats_service,
    )
    from docqa.api.main import create_app
    from docqa.application.services import StatsService
    from docqa.configs import Settings

    def _make(
        llm: LanguageModelProvider | None = None,
        settings: Settings | None = None,
        pipeline=None,
        raise_server_exceptions: bool = True,
    ) -> TestClient:
        settings = settings or Settings(environment="development")
        app = create_app(settings)
        query_service = build_query_service(llm or agent_model("unknown"))

        app.dependency_overrides[get_settings_dependency] = lambda: settings
        app.dependency_overrides[get_document_pipeline] = lambda: pipeline or document_pipeline
        app.dependency_overrides[get_query_service] = lambda: query_service
        app.dependency_overrides[get_stats_service] = lambda: StatsService(counter, query_logger)
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make
