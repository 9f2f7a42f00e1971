"""Shared configuration loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings, populated from env vars or .env file."""

    # LLM
    openai_api_key: str = Field(default="", description="OpenAI API key")
    llm_model_name: str = Field(default="gpt-3.5-turbo", description="Chat model identifier")
    llm_temperature: float = Field(default=0.9, ge=0.0, le=2.0)
    llm_base_url: str = Field(
        default="",
        description=(
            "Base URL of an OpenAI-compatible API. Leave empty to use OpenAI cloud."
        ),
    )

    # Embedding
    embedding_model: str = "text-embedding-ada-002"

    # Source page
    source_url: str = "https://hiveclimbing.com/"
    user_agent: str = "webpage-rag/0.1"
    request_timeout: int = Field(default=60, gt=0, description="Page fetch timeout in seconds")

    # Chunking / retrieval
    chunk_size: int = Field(default=100, gt=0)
    chunk_overlap: int = Field(default=20, ge=0)
    retriever_k: int = Field(default=2, gt=0)

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import `settings` wherever needed.
settings = Settings()
