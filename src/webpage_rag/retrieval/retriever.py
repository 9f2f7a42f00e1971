"""Retriever factory for the in-memory vector store."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from langchain_core.vectorstores import VectorStore, VectorStoreRetriever


def get_retriever(vectorstore: VectorStore, k: int = 2) -> VectorStoreRetriever:
    """Return a similarity retriever yielding the top-*k* chunks.

    Parameters
    ----------
    vectorstore:
        Store populated by :func:`~webpage_rag.ingestion.embedder.embed_and_store`.
    k:
        Number of chunks handed to the model per question.
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    return vectorstore.as_retriever(search_type="similarity", search_kwargs={"k": k})
