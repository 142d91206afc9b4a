"""Logging utilities for the kurs_pricing package."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = "kurs_pricing") -> logging.Logger:
    """Return a module-level logger configured with a simple formatter."""
    global _LOGGER
    if _LOGGER is None:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        _LOGGER = logging.getLogger(name)
    return logging.getLogger(name)


def set_level(level: int) -> None:
    """Change the level of the package logger tree (used by ``--debug``)."""

    get_logger()
    logging.getLogger("kurs_pricing").setLevel(level)
    logging.getLogger().setLevel(level)
