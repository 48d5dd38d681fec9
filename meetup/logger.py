"""Configuration centralisée des logs.

Usage :
    from meetup.logger import get_logger
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging

from meetup.config import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
