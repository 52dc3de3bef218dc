"""Logging configuration.

Log records go to stderr so stdout only ever carries command output.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(*, verbose: bool = False, level: str = "WARNING") -> None:
    """Install a stderr handler on the `porkers` logger.

    Args:
        verbose: force DEBUG regardless of `level`.
        level: level name used when not verbose (e.g. "INFO").
    """

    resolved = logging.DEBUG if verbose else logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    logger = logging.getLogger("porkers")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False

    logger.debug("Logging configured: stderr, level=%s", logging.getLevelName(resolved))
