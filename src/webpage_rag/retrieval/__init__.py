"""
Retrieval — similarity search over the in-memory store and the
response models that carry retrieved context back to the caller.

Public surface
--------------
- :func:`get_retriever` — top-*k* similarity retriever factory.
- :class:`Citation`, :class:`ChainResponse` — data models.
"""

from webpage_rag.retrieval.models import ChainResponse, Citation
from webpage_rag.retrieval.retriever import get_retriever

__all__ = [
    "ChainResponse",
    "Citation",
    "get_retriever",
]
