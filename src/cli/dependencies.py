"""Command line settings read from the environment."""

import logging
import os

logger = logging.getLogger(__name__)


def get_quiz_size() -> int | None:
    value = os.getenv('QUIZ_SIZE')
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring invalid QUIZ_SIZE", extra={"value": value})
        return None
