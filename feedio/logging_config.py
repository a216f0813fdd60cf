"""
Logging configuration for feedio

Components never log through a module-level logger: the facade receives a
logger and hands it to every collaborator it builds.
"""

import io
import logging
import sys

LOGGER_NAME = "feedio"


def setup_logging(level=logging.INFO, stream=None) -> logging.Logger:
    """
    Configure the feedio logger

    Args:
        level: Logging level (default: INFO)
        stream: Optional text stream, defaults to a UTF-8 wrapper around stdout

    Returns:
        logging.Logger: Configured logger to inject into FeedIo
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers = []

    # UTF-8 console stream (fixes Windows cp1252 issues with feed titles)
    if stream is None:
        stream = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace")
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)8s %(message)s"))

    logger.addHandler(handler)

    return logger


def null_logger() -> logging.Logger:
    """Return a logger that discards everything (useful for tests and libraries)."""
    logger = logging.getLogger(f"{LOGGER_NAME}.null")
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger
