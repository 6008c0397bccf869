"""Logging configuration for the API."""

from __future__ import annotations

import logging
import sys


def setup_logging(
    name: str = "app",
    level: str | int = logging.INFO,
) -> logging.Logger:
    """Configure the application logger with a console handler.

    Every module logs through ``logging.getLogger(__name__)``, so configuring
    the package logger covers the whole application.

    Args:
        name: Logger name
        level: Logging level name or number

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
