"""Logging configuration helpers for the exam admin console."""

from __future__ import annotations

import logging
from logging import Logger


def configure_logging(level: int = logging.INFO) -> Logger:
    """Configure basic logging for the application and return the package logger."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    # Per-request logging from urllib3 drowns out our own.
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return logging.getLogger("exam_admin")
