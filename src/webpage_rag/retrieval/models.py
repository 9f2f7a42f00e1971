"""Domain models for retrieved context and the printable chain response."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from langchain_core.documents import Document


class Citation(BaseModel):
    """Provenance record linking a retrieved chunk back to its page.

    Attributes
    ----------
    source:
        URL the chunk was scraped from.
    title:
        Page title, when the page declares one.
    chunk_index:
        Ordinal position of the chunk within the page.
    content:
        The chunk text that was placed in the prompt.
    """

    source: str = "unknown"
    title: str | None = None
    chunk_index: int | None = None
    content: str = ""

    @classmethod
    def from_document(cls, doc: Document) -> Citation:
        meta = doc.metadata
        return cls(
            source=meta.get("source", "unknown"),
            title=meta.get("title"),
            chunk_index=meta.get("chunk_index"),
            content=doc.page_content,
        )

    def short_ref(self) -> str:
        """Return a compact ``[source§chunk]`` reference string."""
        chunk = self.chunk_index if self.chunk_index is not None else "?"
        return f"[{self.source}§{chunk}]"


class ChainResponse(BaseModel):
    """Result of one question: the input, the answer and its context."""

    input: str
    answer: str
    context: list[Citation] = Field(default_factory=list)

    @classmethod
    def from_state(cls, state: dict[str, Any]) -> ChainResponse:
        """Build a response from the final retrieval-graph state."""
        return cls(
            input=state["input"],
            answer=state.get("answer", ""),
            context=[Citation.from_document(d) for d in state.get("context", [])],
        )

    def __str__(self) -> str:  # noqa: D105
        refs = " ".join(c.short_ref() for c in self.context)
        return f"{self.input!r} -> {self.answer[:120]} {refs}".rstrip()
