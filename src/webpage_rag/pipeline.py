"""End-to-end wiring: page -> chunks -> store -> retrieval graph.

Usage::

    from webpage_rag.pipeline import answer_questions, build_retrieval_chain

    chain = build_retrieval_chain("https://hiveclimbing.com/")
    for response in answer_questions(chain, ["what is the color of the sea?"]):
        print(response.answer)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable

from webpage_rag.chain.documents import build_document_chain
from webpage_rag.chain.graph import build_graph, create_initial_state
from webpage_rag.chain.llm import get_llm
from webpage_rag.config import settings
from webpage_rag.ingestion.chunker import chunk_documents
from webpage_rag.ingestion.embedder import embed_and_store
from webpage_rag.ingestion.loader import load_webpage
from webpage_rag.retrieval.models import ChainResponse
from webpage_rag.retrieval.retriever import get_retriever

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings
    from langchain_core.language_models import BaseChatModel

logger = logging.getLogger(__name__)


def build_retrieval_chain(
    source_url: str | None = None,
    *,
    embedding: Embeddings | None = None,
    llm: BaseChatModel | None = None,
    k: int | None = None,
) -> Any:
    """Load and index *source_url*, then compile the retrieval graph.

    Every argument left as ``None`` falls back to :data:`settings`.

    Raises
    ------
    ValueError
        When the page yields no documents or no chunks.
    """
    url = source_url if source_url is not None else settings.source_url

    documents = load_webpage(url)
    if not documents:
        raise ValueError(f"No documents loaded from {url}")

    chunks = chunk_documents(
        documents,
        chunk_size=settings.chunk_size,
        chunk_overlap=settings.chunk_overlap,
    )
    if not chunks:
        raise ValueError(f"{url} produced no chunks")

    vectorstore = embed_and_store(chunks, embedding=embedding)
    retriever = get_retriever(vectorstore, k=k if k is not None else settings.retriever_k)
    document_chain = build_document_chain(llm or get_llm())
    return build_graph(retriever, document_chain)


def ask(chain: Any, question: str) -> ChainResponse:
    """Run *chain* for a single *question*."""
    result = chain.invoke(create_initial_state(question))
    return ChainResponse.from_state(result)


def answer_questions(chain: Any, questions: Iterable[str]) -> list[ChainResponse]:
    """Ask each question in order.  No history is carried between them."""
    return [ask(chain, q) for q in questions]
