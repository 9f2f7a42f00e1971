"""Unit tests for the end-to-end pipeline with all externals faked."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from langchain_core.documents import Document
from langchain_core.language_models import FakeListChatModel

from webpage_rag.pipeline import answer_questions, ask, build_retrieval_chain
from webpage_rag.retrieval.models import ChainResponse

URL = "https://climbing.example.com/"


def _build(docs: list[Document], fake_embedding, responses: list[str]):
    with patch("webpage_rag.pipeline.load_webpage", return_value=docs) as loader:
        chain = build_retrieval_chain(
            URL,
            embedding=fake_embedding,
            llm=FakeListChatModel(responses=responses),
            k=2,
        )
    loader.assert_called_once_with(URL)
    return chain


def test_ask_returns_response(page_documents, fake_embedding) -> None:
    chain = _build(page_documents, fake_embedding, ["Turquoise."])

    response = ask(chain, "what is the color of the sea?")

    assert isinstance(response, ChainResponse)
    assert response.answer == "Turquoise."
    assert len(response.context) == 2
    assert all(c.source == URL for c in response.context)
    assert all(c.chunk_index is not None for c in response.context)


def test_answer_questions_in_order(page_documents, fake_embedding) -> None:
    chain = _build(page_documents, fake_embedding, ["Turquoise.", "Red and yellow."])

    responses = answer_questions(
        chain, ["what is the color of the sea?", "what other colors are in there?"]
    )

    assert [r.input for r in responses] == [
        "what is the color of the sea?",
        "what other colors are in there?",
    ]
    assert [r.answer for r in responses] == ["Turquoise.", "Red and yellow."]


def test_context_chunks_respect_chunk_size(page_documents, fake_embedding) -> None:
    chain = _build(page_documents, fake_embedding, ["x"])
    response = ask(chain, "opening hours")
    assert all(len(c.content) <= 100 for c in response.context)


def test_empty_page_raises(fake_embedding) -> None:
    with pytest.raises(ValueError, match="No documents loaded"):
        _build([], fake_embedding, ["x"])


def test_blank_page_raises(fake_embedding) -> None:
    with pytest.raises(ValueError, match="produced no chunks"):
        _build([Document(page_content="", metadata={"source": URL})], fake_embedding, ["x"])


def test_defaults_come_from_settings(page_documents, fake_embedding) -> None:
    with (
        patch("webpage_rag.pipeline.load_webpage", return_value=page_documents) as loader,
        patch("webpage_rag.pipeline.get_llm", return_value=FakeListChatModel(responses=["x"])),
        patch("webpage_rag.pipeline.settings") as fake_settings,
    ):
        fake_settings.source_url = "https://default.example.com/"
        fake_settings.chunk_size = 100
        fake_settings.chunk_overlap = 20
        fake_settings.retriever_k = 1
        chain = build_retrieval_chain(embedding=fake_embedding)

    loader.assert_called_once_with("https://default.example.com/")
    assert len(ask(chain, "sea").context) == 1


def test_zero_k_is_rejected(page_documents, fake_embedding) -> None:
    with (
        patch("webpage_rag.pipeline.load_webpage", return_value=page_documents),
        pytest.raises(ValueError, match="k must be"),
    ):
        build_retrieval_chain(
            URL,
            embedding=fake_embedding,
            llm=FakeListChatModel(responses=["x"]),
            k=0,
        )


def test_empty_url_is_not_replaced_by_default(page_documents, fake_embedding) -> None:
    with patch("webpage_rag.pipeline.load_webpage", return_value=page_documents) as loader:
        build_retrieval_chain(
            "",
            embedding=fake_embedding,
            llm=FakeListChatModel(responses=["x"]),
        )
    loader.assert_called_once_with("")
