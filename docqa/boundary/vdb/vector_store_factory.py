"""
Vector store factory for selecting between FAISS (dev) and Pinecone (prod).

Depends on VECTOR_STORE_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: docqa.boundary.vdb, docqa.configs
System role: Vector store instantiation and selection
"""

import logging

from langchain_core.embeddings import Embeddings

from docqa.boundary.interfaces import VectorStoreProvider
from docqa.configs import Settings, get_settings

logger = logging.getLogger(__name__)


def get_vector_store(
    embeddings: Embeddings,
    settings: Settings | None = None,
) -> VectorStoreProvider:
    """
    Factory function to get vector store based on environment configuration.

    Args:
        embeddings: LangChain embeddings (needed by the FAISS wrapper)
        settings: Application settings (loaded from environment if None)

    Returns:
        VectorStoreProvider: Configured vector store instance

    Raises:
        ValueError: If store type is invalid or credentials are missing
    """
    settings = settings or get_settings()
    config = settings.vector_store
    store_type = config.store_type.lower()

    if store_type == "faiss":
        from docqa.boundary.vdb.faiss_vectors_store import FAISSVectorsStore

        logger.info(f"{__name__}:get_vector_store - Creating FAISS vector store (local dev mode)")
        return FAISSVectorsStore(
            dimension=config.dimension,
            embeddings=embeddings,
            index_name=config.index_name,
            index_dir=config.faiss_index_dir,
        )

    if store_type == "pinecone":
        from docqa.boundary.vdb.pinecone_store import PineconeVectorStore

        if not config.pinecone_api_key:
            raise ValueError("PINECONE_API_KEY is required for the pinecone vector store")
        logger.info(f"{__name__}:get_vector_store - Creating Pinecone store (production mode)")
        return PineconeVectorStore(
            index_name=config.index_name,
            api_key=config.pinecone_api_key,
        )

    raise ValueError(
        f"Invalid vector store type: {store_type}. "
        f"Must be 'faiss' (dev) or 'pinecone' (production)."
    )
