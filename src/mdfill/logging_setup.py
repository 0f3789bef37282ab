"""mdfill.logging_setup
====================

Opt-in logging for applications embedding mdfill.  The library itself only
calls ``logging.getLogger(__name__)``; nothing here runs on import and the
root logger is never touched.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union

__all__ = ["configure_logging", "LOG_FORMAT"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach a single stream handler to the ``mdfill`` logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger("mdfill")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)

    if getattr(logger, "_mdfill_configured", False):
        return logger

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger._mdfill_configured = True  # type: ignore[attr-defined]
    return logger
