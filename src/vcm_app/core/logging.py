"""
Application-wide logging configuration.

Console logging with a uniform `timestamp | level | module | message` line.
`configure_logging` is called once when the API app is created; every other
module only asks for a named logger.
"""

from __future__ import annotations

import logging


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Unknown level names fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    logging.getLogger(__name__).info("Logging initialized with level %s", level)


def get_logger(name: str) -> logging.Logger:
    """
    Usage:
        from ..core.logging import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
