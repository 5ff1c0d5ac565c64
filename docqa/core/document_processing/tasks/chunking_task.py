"""
Text chunking task using RecursiveCharacterTextSplitter.

Splits documents into retrievable chunks, preferring paragraph, line,
sentence and word boundaries before a hard character cut.

Dependencies: langchain_text_splitters
System role: First stage of document ingestion pipeline
"""

import logging

from langchain_text_splitters import RecursiveCharacterTextSplitter

from docqa.core.exceptions import EmptyInputError, EmptyResultError, ValidationError

from ..models import Chunk

logger = logging.getLogger(__name__)

# Coarsest first; "" is the hard character cut
SEPARATORS = ["\n\n", "\n", ". ", "? ", "! ", " ", ""]


class ChunkingTask:
    """Split document text into overlapping chunks."""

    def __init__(
        self,
        chunk_size: int = 500,
        chunk_overlap: int = 100,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks

        Raises:
            ValidationError: When the overlap/size pair is invalid
        """
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._splitter = self._build_splitter(chunk_size, chunk_overlap)

    @staticmethod
    def _build_splitter(size: int, overlap: int) -> RecursiveCharacterTextSplitter:
        if not 0 < overlap < size:
            raise ValidationError(
                "Chunk overlap must be positive and smaller than chunk size",
                field="chunk_overlap",
                details={"chunk_size": size, "chunk_overlap": overlap},
            )
        return RecursiveCharacterTextSplitter(
            separators=SEPARATORS,
            keep_separator="end",
            chunk_size=size,
            chunk_overlap=overlap,
            add_start_index=True,
            length_function=len,
        )

    def split(
        self,
        text: str,
        size: int | None = None,
        overlap: int | None = None,
    ) -> list[Chunk]:
        """
        Split text into chunks.

        Args:
            text: Document text
            size: Override for the configured chunk size
            overlap: Override for the configured chunk overlap

        Returns:
            list[Chunk]: Ordered chunks; a text shorter than size yields one chunk

        Raises:
            EmptyInputError: When text is empty or whitespace-only
            ValidationError: When the overlap/size pair is invalid
        """
        if not text or not text.strip():
            raise EmptyInputError("Cannot chunk an empty document", field="text")

        if size is None and overlap is None:
            splitter = self._splitter
        else:
            splitter = self._build_splitter(
                size if size is not None else self.chunk_size,
                overlap if overlap is not None else self.chunk_overlap,
            )

        documents = splitter.create_documents([text])
        if not documents:
            raise EmptyResultError("Chunking produced no chunks")

        chunks = [
            Chunk(
                index=i,
                content=doc.page_content,
                start_index=max(doc.metadata.get("start_index", 0), 0),
            )
            for i, doc in enumerate(documents)
        ]

        logger.debug(
            f"{__name__}:split - Split document into {len(chunks)} chunks",
            extra={"text_length": len(text), "chunk_count": len(chunks)},
        )
        return chunks
