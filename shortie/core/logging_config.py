"""Logging configuration for Shortie."""

import logging
import sys

LOGGER_NAME = "shortie"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the ``shortie`` logger hierarchy.

    Module loggers (``shortie.services.url_service`` etc.) propagate here,
    so a single stdout handler covers the whole service.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        The configured ``shortie`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)

    return logger
