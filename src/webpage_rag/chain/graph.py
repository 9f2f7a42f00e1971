"""LangGraph graph definition — the retrieval chain.

Wires the nodes from :mod:`webpage_rag.chain.nodes` into a compiled
:class:`StateGraph`::

    retrieve  →  generate  →  END

``retrieve`` looks up the top-*k* chunks for the question and
``generate`` stuffs them into the prompt and calls the model.  The
final state carries ``input``, ``context`` and ``answer``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from langgraph.graph import END, StateGraph

from webpage_rag.chain.nodes import make_generate_node, make_retrieve_node
from webpage_rag.chain.state import ChainState

if TYPE_CHECKING:
    from langchain_core.retrievers import BaseRetriever
    from langchain_core.runnables import Runnable


def build_graph(retriever: BaseRetriever, document_chain: Runnable) -> Any:
    """Construct and return the compiled retrieval graph.

    Parameters
    ----------
    retriever:
        Source of context chunks for each question.
    document_chain:
        Runnable from :func:`~webpage_rag.chain.documents.build_document_chain`.

    Returns
    -------
    CompiledGraph
        A compiled LangGraph workflow ready for ``.invoke()``.
    """
    workflow = StateGraph(ChainState)

    workflow.add_node("retrieve", make_retrieve_node(retriever))
    workflow.add_node("generate", make_generate_node(document_chain))

    workflow.set_entry_point("retrieve")
    workflow.add_edge("retrieve", "generate")
    workflow.add_edge("generate", END)

    return workflow.compile()


def create_initial_state(question: str) -> dict[str, Any]:
    """Build the initial state dict for ``graph.invoke()``.

    Usage::

        graph = build_graph(retriever, document_chain)
        result = graph.invoke(create_initial_state("what is the color of the sea?"))
        print(result["answer"])
    """
    return {"input": question, "context": [], "answer": ""}
