"""The "stuff documents" chain — every retrieved chunk goes into one prompt."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from langchain_core.output_parsers import StrOutputParser
from langchain_core.runnables import RunnablePassthrough

from webpage_rag.chain.prompts import RETRIEVAL_PROMPT, format_documents

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel
    from langchain_core.prompts import BasePromptTemplate
    from langchain_core.runnables import Runnable


def build_document_chain(
    llm: BaseChatModel,
    prompt: BasePromptTemplate = RETRIEVAL_PROMPT,
) -> Runnable:
    """Compose ``format context -> prompt -> llm -> str``.

    Parameters
    ----------
    llm:
        Chat model that writes the answer.
    prompt:
        Template with a ``context`` variable (plus whatever the caller
        supplies, normally ``input``).

    Returns
    -------
    Runnable
        Accepts ``{"input": str, "context": list[Document]}`` and
        returns the answer text.
    """
    if "context" not in prompt.input_variables:
        raise ValueError(
            f"Prompt must accept a 'context' variable, got {prompt.input_variables}"
        )

    def _format_context(inputs: dict[str, Any]) -> str:
        return format_documents(inputs["context"])

    return (
        RunnablePassthrough.assign(context=_format_context)
        | prompt
        | llm
        | StrOutputParser()
    ).with_config(run_name="stuff_documents_chain")
