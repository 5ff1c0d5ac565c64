"""
Language model boundary layer.

Adapters exposing LangChain embedding and chat models through the
EmbeddingProvider and LanguageModelProvider interfaces.
"""

from docqa.boundary.llm.gemini_provider import (
    ChatModelProvider,
    LangChainEmbeddingProvider,
    create_chat_model,
    create_embeddings,
)

__all__ = [
    "ChatModelProvider",
    "LangChainEmbeddingProvider",
    "create_chat_model",
    "create_embeddings",
]
