"""Prompt template for the retrieval chain.

The template exposes two variables: ``context`` (the retrieved chunks,
already formatted) and ``input`` (the user's question).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from langchain_core.prompts import ChatPromptTemplate

if TYPE_CHECKING:
    from langchain_core.documents import Document

DOCUMENT_SEPARATOR = "\n\n"

RETRIEVAL_TEMPLATE = """\
Answer the user's question from the following context:
{context}
Question: {input}"""

RETRIEVAL_PROMPT = ChatPromptTemplate.from_template(RETRIEVAL_TEMPLATE)


def format_documents(documents: list[Document], separator: str = DOCUMENT_SEPARATOR) -> str:
    """Join the text of *documents* into a single context block."""
    return separator.join(doc.page_content for doc in documents)
