"""Logging setup for the filescope CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "filescope-rich"


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Route ``filescope`` log records to stderr through a Rich handler.

    Calling this again replaces the previously installed handler rather than
    stacking a second one.

    Args:
        level: Level name or number applied to the ``filescope`` logger.

    Returns:
        logging.Logger: The configured package logger.
    """
    logger = logging.getLogger("filescope")
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=False,
        markup=False,
    )
    handler.set_name(_HANDLER_NAME)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = ["configure_logging"]
