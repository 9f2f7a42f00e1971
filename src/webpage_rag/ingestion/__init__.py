"""
Ingestion — page loading, chunking, and embedding into the vector store.

Turns a single webpage into small overlapping chunks held in an
in-memory vector store, ready for similarity search.
"""

from webpage_rag.ingestion.chunker import chunk_documents
from webpage_rag.ingestion.embedder import embed_and_store, get_embedding_function
from webpage_rag.ingestion.loader import load_webpage, normalise_text

__all__ = [
    "chunk_documents",
    "embed_and_store",
    "get_embedding_function",
    "load_webpage",
    "normalise_text",
]
