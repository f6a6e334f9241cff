from __future__ import annotations

import logging
import sys

BASE_LOGGER = "find_up"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Sets up the package logger on stderr; stdout is reserved for results."""
    logger = logging.getLogger(BASE_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate handlers if setup_logging is called multiple times
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns a logger instance."""
    if name:
        return logging.getLogger(f"{BASE_LOGGER}.{name}")
    return logging.getLogger(BASE_LOGGER)
