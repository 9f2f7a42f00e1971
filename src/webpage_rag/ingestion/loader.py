"""Webpage loader — thin wrapper around LangChain's ``WebBaseLoader``."""

from __future__ import annotations

import logging
import re
import unicodedata

from langchain_community.document_loaders import WebBaseLoader
from langchain_core.documents import Document

from webpage_rag.config import settings

logger = logging.getLogger(__name__)


def normalise_text(text: str) -> str:
    """Unicode NFC, collapse whitespace, strip control chars."""
    text = unicodedata.normalize("NFC", text)
    text = re.sub(r"[\x00-\x08\x0b\x0c\x0e-\x1f]", "", text)  # ctrl chars
    text = re.sub(r"[^\S\n]+", " ", text)  # collapse spaces (keep \n)
    text = re.sub(r" *\n *", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)  # max two consecutive newlines
    return text.strip()


def load_webpage(url: str) -> list[Document]:
    """Fetch *url* and return its visible text as LangChain documents.

    Parameters
    ----------
    url:
        Address of the page to scrape.

    Returns
    -------
    list[Document]
        One document per fetched page, with ``source`` (and, when the
        page has one, ``title``) in its metadata.
    """
    loader = WebBaseLoader(
        web_path=url,
        header_template={"User-Agent": settings.user_agent},
        requests_kwargs={"timeout": settings.request_timeout},
    )
    raw_docs = loader.load()

    documents = [
        Document(page_content=normalise_text(doc.page_content), metadata=dict(doc.metadata))
        for doc in raw_docs
    ]
    logger.info(
        "Loaded %d document(s) from %s (%d chars)",
        len(documents),
        url,
        sum(len(d.page_content) for d in documents),
    )
    return documents
