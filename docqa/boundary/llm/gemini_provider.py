"""
Google Gemini providers.

Wraps LangChain GoogleGenerativeAIEmbeddings and ChatGoogleGenerativeAI
behind the provider interfaces used by the pipeline.

Dependencies: langchain_google_genai, langchain_core
System role: Embedding and language model adapters
"""

import logging
from collections.abc import Sequence

from langchain_core.embeddings import Embeddings
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI, GoogleGenerativeAIEmbeddings

from docqa.boundary.interfaces import EmbeddingProvider, LanguageModelProvider
from docqa.configs.llm import LLMSettings

logger = logging.getLogger(__name__)


def create_embeddings(settings: LLMSettings) -> GoogleGenerativeAIEmbeddings:
    """
    Build the Gemini embeddings client.

    Raises:
        ValueError: When no Google API key is configured
    """
    if not settings.google_api_key:
        raise ValueError("GEMINI_API_KEY is required for Google embeddings")
    logger.info(f"{__name__}:create_embeddings - model={settings.embedding_model}")
    return GoogleGenerativeAIEmbeddings(
        model=settings.embedding_model,
        google_api_key=settings.google_api_key,
    )


def create_chat_model(settings: LLMSettings) -> ChatGoogleGenerativeAI:
    """
    Build the Gemini chat model.

    Raises:
        ValueError: When no Google API key is configured
    """
    if not settings.google_api_key:
        raise ValueError("GEMINI_API_KEY is required for the Gemini chat model")
    logger.info(f"{__name__}:create_chat_model - model={settings.chat_model}")
    return ChatGoogleGenerativeAI(
        model=settings.chat_model,
        temperature=settings.temperature,
        google_api_key=settings.google_api_key,
    )


class LangChainEmbeddingProvider(EmbeddingProvider):
    """EmbeddingProvider backed by any LangChain Embeddings implementation."""

    def __init__(self, embeddings: Embeddings) -> None:
        self._embeddings = embeddings

    @property
    def embeddings(self) -> Embeddings:
        """Underlying LangChain embeddings object."""
        return self._embeddings

    async def embed_documents(self, texts: Sequence[str]) -> list[list[float]]:
        return await self._embeddings.aembed_documents(list(texts))

    async def embed_query(self, text: str) -> list[float]:
        return await self._embeddings.aembed_query(text)


class ChatModelProvider(LanguageModelProvider):
    """LanguageModelProvider backed by a LangChain chat model."""

    def __init__(self, model: BaseChatModel) -> None:
        self._model = model

    async def generate(self, prompt: str) -> str:
        """
        Send a single-turn prompt and return the text of the reply.

        Args:
            prompt: Fully rendered prompt

        Returns:
            str: Model reply text
        """
        message = await self._model.ainvoke(prompt)
        return _content_to_text(message.content)


def _content_to_text(content) -> str:
    # Gemini may return a list of content parts instead of a plain string
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content)
