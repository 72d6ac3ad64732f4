"""Logging configuration for the sampler."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Configure global logging.

    Diagnostics go to stderr so that stdout carries only sample lines.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    logging.basicConfig(
        level=level.upper(),
        handlers=[handler],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance."""
    return logging.getLogger(name)
