# src/deck_engine/logging_utils.py

import logging

from config import LOG_LEVEL, LOG_FORMAT, LOG_DATE_FORMAT


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start. The engine itself never configures logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
