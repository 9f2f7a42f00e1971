"""Shared pytest configuration and fixtures."""

from __future__ import annotations

import pytest
from langchain_core.documents import Document
from langchain_core.embeddings import DeterministicFakeEmbedding

SOURCE_URL = "https://climbing.example.com/"


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


@pytest.fixture()
def page_documents() -> list[Document]:
    """A single scraped page, as ``load_webpage`` would return it."""
    text = (
        "Hive Climbing is a bouldering gym by the sea.\n\n"
        "The walls are painted turquoise like the sea outside.\n\n"
        "Holds come in red, yellow, purple and black.\n\n"
        "Opening hours are 10am to 10pm every day."
    )
    return [Document(page_content=text, metadata={"source": SOURCE_URL, "title": "Hive"})]


@pytest.fixture()
def chunk_documents_sample() -> list[Document]:
    """Pre-chunked documents with the metadata the chunker adds."""
    texts = [
        "The walls are painted turquoise like the sea outside.",
        "Holds come in red, yellow, purple and black.",
        "Opening hours are 10am to 10pm every day.",
        "Day passes and memberships are available.",
    ]
    return [
        Document(
            page_content=t,
            metadata={"source": SOURCE_URL, "chunk_index": i, "chunk_count": len(texts)},
        )
        for i, t in enumerate(texts)
    ]


@pytest.fixture()
def fake_embedding() -> DeterministicFakeEmbedding:
    return DeterministicFakeEmbedding(size=32)
