"""Logging setup for the ``jobservice`` package logger."""
from __future__ import annotations
import logging
from typing import Optional

from jobservice.core.config import LOG_FILE, LOG_LEVEL

PACKAGE_LOGGER = "jobservice"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL, logfile: Optional[str] = LOG_FILE) -> logging.Logger:
    """
    Attach a stderr handler (and a file handler when ``logfile`` is set) to the
    package logger. Records still propagate to the root logger. Repeat calls
    only adjust the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
