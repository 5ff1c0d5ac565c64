"""
FAISS vector store for local development.

Provides the same provider interface as PineconeVectorStore but keeps the
index on local disk. Vectors are L2-normalised and searched by inner
product, so the returned score is cosine similarity (higher = more relevant).

Dependencies: faiss-cpu, langchain_community, langchain_core
System role: Local vector store for development RAG
"""

import logging
import threading
from collections.abc import Sequence
from pathlib import Path

import faiss
from fastapi.concurrency import run_in_threadpool
from langchain_community.docstore.in_memory import InMemoryDocstore
from langchain_community.vectorstores import FAISS
from langchain_community.vectorstores.utils import DistanceStrategy
from langchain_core.embeddings import Embeddings

from docqa.boundary.interfaces import VectorStoreProvider
from docqa.boundary.vdb.vector_schemas import IndexedRecord, VectorMatch
from docqa.core.exceptions import DimensionMismatchError

logger = logging.getLogger(__name__)

RECORD_ID_KEY = "record_id"


class FAISSVectorsStore(VectorStoreProvider):
    """
    FAISS vector store for local development.

    Wraps LangChain FAISS with precomputed embeddings.
    Persists index to disk for reuse across runs when index_dir is set.
    """

    def __init__(
        self,
        dimension: int,
        embeddings: Embeddings,
        index_name: str = "local-dev",
        index_dir: str | None = None,
    ) -> None:
        """
        Initialize FAISS vector store.

        Args:
            dimension: Vector dimension of the index
            embeddings: LangChain embeddings (only used by LangChain for text queries)
            index_name: Local index file name
            index_dir: Directory for persistence (in-memory only if None)

        Raises:
            DimensionMismatchError: Persisted index has a different dimension
        """
        self._dimension = dimension
        self._embeddings = embeddings
        self._index_name = index_name
        self._index_dir = Path(index_dir) if index_dir else None
        # add_embeddings mutates index and docstore together
        self._lock = threading.Lock()
        self._vector_store = self._load_or_create_index()

    def _load_or_create_index(self) -> FAISS:
        """Load existing FAISS index or create new one."""
        if self._index_dir and (self._index_dir / f"{self._index_name}.faiss").exists():
            logger.info(f"{__name__}:_load_or_create_index - Loading index from {self._index_dir}")
            store = FAISS.load_local(
                str(self._index_dir),
                self._embeddings,
                index_name=self._index_name,
                allow_dangerous_deserialization=True,
                normalize_L2=True,
                distance_strategy=DistanceStrategy.MAX_INNER_PRODUCT,
            )
            if store.index.d != self._dimension:
                raise DimensionMismatchError(
                    "Persisted FAISS index dimension does not match configuration",
                    expected=self._dimension,
                    actual=store.index.d,
                )
            return store

        logger.info(
            f"{__name__}:_load_or_create_index - Creating new FAISS index (dimension={self._dimension})"
        )
        return FAISS(
            embedding_function=self._embeddings,
            index=faiss.IndexFlatIP(self._dimension),
            docstore=InMemoryDocstore(),
            index_to_docstore_id={},
            normalize_L2=True,
            distance_strategy=DistanceStrategy.MAX_INNER_PRODUCT,
        )

    async def upsert(self, records: Sequence[IndexedRecord]) -> int:
        """Add one batch of records and persist the index."""
        return await run_in_threadpool(self._add_records, list(records))

    async def query(self, vector: Sequence[float], top_k: int) -> list[VectorMatch]:
        """Return up to top_k nearest records by cosine similarity."""
        results = await run_in_threadpool(self._search, list(vector), top_k)

        matches = []
        for doc, score in results:
            metadata = dict(doc.metadata or {})
            record_id = metadata.pop(RECORD_ID_KEY, "")
            metadata.setdefault("text", doc.page_content)
            matches.append(VectorMatch(id=record_id, score=float(score), metadata=metadata))
        return matches

    def _add_records(self, records: list[IndexedRecord]) -> int:
        text_embeddings = [(record.metadata.text, list(record.values)) for record in records]
        metadatas = [
            {**record.metadata.to_store(), RECORD_ID_KEY: record.id} for record in records
        ]
        ids = [record.id for record in records]

        with self._lock:
            added = self._vector_store.add_embeddings(
                text_embeddings=text_embeddings,
                metadatas=metadatas,
                ids=ids,
            )
            if self._index_dir:
                self._index_dir.mkdir(parents=True, exist_ok=True)
                self._vector_store.save_local(str(self._index_dir), index_name=self._index_name)

        logger.info(f"{__name__}:_add_records - Added {len(added)} records")
        return len(added)

    def _search(self, vector: list[float], top_k: int) -> list[tuple]:
        with self._lock:
            if self._vector_store.index.ntotal == 0:
                return []
            return self._vector_store.similarity_search_with_score_by_vector(vector, k=top_k)
