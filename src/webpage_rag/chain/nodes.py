"""Graph nodes — one function per step of the retrieval chain.

Node contract
-------------
* Accepts the full :class:`ChainState` dict.
* Returns a *partial* dict with **only the keys that changed**.

The retriever and document chain are bound through small factories so
each node can be built around fakes in tests.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from webpage_rag.chain.state import ChainState

if TYPE_CHECKING:
    from langchain_core.retrievers import BaseRetriever
    from langchain_core.runnables import Runnable

logger = logging.getLogger(__name__)

Node = Callable[[ChainState], dict[str, Any]]


def make_retrieve_node(retriever: BaseRetriever) -> Node:
    """Return the ``retrieve`` node bound to *retriever*."""

    def retrieve(state: ChainState) -> dict[str, Any]:
        documents = retriever.invoke(state["input"])
        logger.info("Retrieved %d chunk(s) for %r", len(documents), state["input"])
        return {"context": documents}

    return retrieve


def make_generate_node(document_chain: Runnable) -> Node:
    """Return the ``generate`` node bound to *document_chain*."""

    def generate(state: ChainState) -> dict[str, Any]:
        answer = document_chain.invoke(
            {"input": state["input"], "context": state.get("context", [])}
        )
        logger.info("Answer length: %d chars", len(answer))
        return {"answer": answer}

    return generate
