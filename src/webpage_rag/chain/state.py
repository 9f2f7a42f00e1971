"""State flowing through the retrieval graph."""

from __future__ import annotations

from typing import TypedDict

from langchain_core.documents import Document


class ChainState(TypedDict):
    """Typed state shared by the ``retrieve`` and ``generate`` nodes.

    Attributes
    ----------
    input:
        The user's question.
    context:
        Chunks returned by the retriever for ``input``.
    answer:
        The model's answer (populated by the ``generate`` node).
    """

    input: str
    context: list[Document]
    answer: str
