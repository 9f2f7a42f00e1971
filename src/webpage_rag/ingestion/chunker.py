"""Text chunking strategies."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from langchain_text_splitters import RecursiveCharacterTextSplitter

if TYPE_CHECKING:
    from langchain_core.documents import Document

logger = logging.getLogger(__name__)

DEFAULT_SEPARATORS = ["\n\n", "\n", " ", ""]


def chunk_documents(
    documents: list[Document],
    chunk_size: int = 100,
    chunk_overlap: int = 20,
) -> list[Document]:
    """Split *documents* into smaller chunks for embedding.

    Parameters
    ----------
    documents:
        Source documents produced by a loader.
    chunk_size:
        Maximum number of characters per chunk.
    chunk_overlap:
        Number of overlapping characters between consecutive chunks.

    Returns
    -------
    list[Document]
        Chunked documents ready for embedding.  Each chunk keeps its
        parent's metadata plus ``chunk_index`` and ``chunk_count``.
    """
    if chunk_overlap >= chunk_size:
        raise ValueError(
            f"chunk_overlap ({chunk_overlap}) must be < chunk_size ({chunk_size})"
        )

    splitter = RecursiveCharacterTextSplitter(
        chunk_size=chunk_size,
        chunk_overlap=chunk_overlap,
        length_function=len,
        separators=DEFAULT_SEPARATORS,
    )

    chunks: list[Document] = []
    for doc in documents:
        pieces = splitter.split_documents([doc])
        for idx, piece in enumerate(pieces):
            piece.metadata["chunk_index"] = idx
            piece.metadata["chunk_count"] = len(pieces)
        chunks.extend(pieces)

    logger.info("Produced %d chunks from %d documents", len(chunks), len(documents))
    return chunks
