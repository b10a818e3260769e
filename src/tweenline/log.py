"""Logging setup for the ``tweenline`` package."""

from __future__ import annotations

import logging

# Tween failures and option problems are appended to this file once
# ``configure_logging`` has been called.
LOG_FILE = "tweenline.log"

logger = logging.getLogger("tweenline")


def configure_logging(level: int | str = logging.INFO, log_file: str = LOG_FILE) -> logging.Logger:
    """Attach a file handler to the package logger if none is present."""
    if not logger.handlers:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level)
    return logger


__all__ = ["LOG_FILE", "logger", "configure_logging"]
