"""LLM initialisation — single place to swap providers.

Talks to the OpenAI cloud by default.  Setting ``LLM_BASE_URL`` points
``ChatOpenAI`` at any OpenAI-compatible ``/v1/chat/completions`` server
instead.
"""

from __future__ import annotations

import logging

from langchain_openai import ChatOpenAI

from webpage_rag.config import settings

logger = logging.getLogger(__name__)


def get_llm(temperature: float | None = None) -> ChatOpenAI:
    """Return the configured chat model.

    *temperature* overrides ``settings.llm_temperature`` when given.
    """
    kwargs: dict = {
        "model": settings.llm_model_name,
        "temperature": settings.llm_temperature if temperature is None else temperature,
    }
    if settings.openai_api_key:
        kwargs["api_key"] = settings.openai_api_key
    if settings.llm_base_url:
        logger.info("Using OpenAI-compatible endpoint: %s", settings.llm_base_url)
        kwargs["base_url"] = settings.llm_base_url

    return ChatOpenAI(**kwargs)
