"""Embedding and in-memory vector-store construction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from langchain_core.vectorstores import InMemoryVectorStore
from langchain_openai import OpenAIEmbeddings

from webpage_rag.config import settings

if TYPE_CHECKING:
    from langchain_core.documents import Document
    from langchain_core.embeddings import Embeddings

logger = logging.getLogger(__name__)


def get_embedding_function() -> OpenAIEmbeddings:
    """Return the configured OpenAI embedding function."""
    kwargs: dict = {"model": settings.embedding_model}
    if settings.openai_api_key:
        kwargs["api_key"] = settings.openai_api_key
    if settings.llm_base_url:
        kwargs["base_url"] = settings.llm_base_url
    return OpenAIEmbeddings(**kwargs)


def embed_and_store(
    documents: list[Document],
    embedding: Embeddings | None = None,
) -> InMemoryVectorStore:
    """Embed *documents* into a fresh in-memory vector store.

    Returns the store so callers can build a retriever from it
    immediately.
    """
    embedding = embedding or get_embedding_function()
    vectorstore = InMemoryVectorStore.from_documents(documents, embedding)
    logger.info("Embedded %d chunk(s) into an in-memory store", len(documents))
    return vectorstore
