"""
Chain — prompt, model and the LangGraph retrieval workflow.

Public API
----------
- :func:`build_graph` — compile the ``retrieve -> generate`` workflow.
- :func:`build_document_chain` — the prompt/LLM chain that answers from context.
- :func:`create_initial_state` — bootstrap the state dict for ``graph.invoke()``.
- :func:`get_llm` — the configured chat model.
- :class:`ChainState` — the TypedDict flowing through every node.
"""

from webpage_rag.chain.documents import build_document_chain
from webpage_rag.chain.graph import build_graph, create_initial_state
from webpage_rag.chain.llm import get_llm
from webpage_rag.chain.prompts import RETRIEVAL_PROMPT, format_documents
from webpage_rag.chain.state import ChainState

__all__ = [
    "RETRIEVAL_PROMPT",
    "ChainState",
    "build_document_chain",
    "build_graph",
    "create_initial_state",
    "format_documents",
    "get_llm",
]
