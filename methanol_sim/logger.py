"""Logging utilities for the methanol process dashboard."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGERS: dict[str, logging.Logger] = {}

DEFAULT_LOGGER = "methanol-sim"


def get_logger(name: str = DEFAULT_LOGGER, level: int = logging.INFO) -> logging.Logger:
    """Return a cached logger writing to stderr, independent of Streamlit's own."""
    if name in _LOGGERS:
        return _LOGGERS[name]

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    _LOGGERS[name] = logger
    return logger


def reset_logger(name: str) -> None:
    """Remove cached loggers, useful for testing."""
    existing: Optional[logging.Logger] = _LOGGERS.pop(name, None)
    if existing:
        for handler in list(existing.handlers):
            existing.removeHandler(handler)
            handler.close()
