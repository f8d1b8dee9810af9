"""Logging configuration."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter
from src.config import settings

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str = __name__) -> logging.Logger:
    """Set up a stdout logger, JSON formatted unless LOG_FORMAT says otherwise."""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)

        if settings.log_format == "json":
            formatter = JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        else:
            formatter = logging.Formatter(PLAIN_FORMAT)

        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
