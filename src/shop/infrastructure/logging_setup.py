"""Application logging.

Diagnostics go to stderr so they never interleave with the menu text the
store prints on stdout.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "shop"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Configure the ``shop`` logger.

    Safe to call more than once: the handler is installed only the first
    time, later calls just change the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
