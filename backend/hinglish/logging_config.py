"""Logging setup for the application."""

import logging

from hinglish.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(config: Settings) -> None:
    """Configure root logging from settings.

    Debug mode forces DEBUG level regardless of ``log_level``.
    """
    level = logging.DEBUG if config.debug else getattr(
        logging, config.log_level.upper(), logging.INFO
    )
    logging.basicConfig(level=level, format=LOG_FORMAT)

    # Keep HTTP client chatter out of normal logs
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
    logging.getLogger("LiteLLM").setLevel(max(level, logging.WARNING))
