"""Script entry point: index the configured page and ask the demo questions."""

from __future__ import annotations

import logging

from webpage_rag.config import settings
from webpage_rag.pipeline import answer_questions, build_retrieval_chain

logger = logging.getLogger(__name__)

QUESTIONS = (
    "what is the color of the sea?",
    "what other colors are in there?",
)


def configure_logging(level: str | int | None = None) -> None:
    """Send log records to stderr so stdout only carries the response."""
    logging.basicConfig(
        level=level or settings.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def main() -> None:
    configure_logging()
    logger.info("Building retrieval chain for %s", settings.source_url)
    chain = build_retrieval_chain()
    responses = answer_questions(chain, QUESTIONS)
    print(responses[-1].model_dump_json(indent=2))


if __name__ == "__main__":
    main()
