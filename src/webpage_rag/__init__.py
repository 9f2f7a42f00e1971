"""webpage-rag — answer questions about a single webpage with retrieval-augmented generation."""

__version__ = "0.1.0"
