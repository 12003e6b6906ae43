"""Logging setup for the sehnblog command line."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Install a single stderr handler on the package logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger("sehnblog")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    if getattr(logger, "_sehnblog_configured", False):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    setattr(logger, "_sehnblog_configured", True)

    logging.getLogger(__name__).debug("Logging initialized (level=%s)", logging.getLevelName(level))
