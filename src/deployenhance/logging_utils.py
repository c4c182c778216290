"""Logging utilities for hosts embedding the enhancer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.logging import RichHandler

if TYPE_CHECKING:
    from pathlib import Path

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOGGER_NAME = "deployenhance"


def configure_logging(level: int = logging.INFO, log_file: Path | None = None) -> logging.Logger:
    """Configure the package logger: rich console output, optional log file.

    Only the "deployenhance" logger is touched, the host's root logger is
    left alone. Calling again replaces the handlers installed before.

    Args:
        level: Level for logger and handlers
        log_file: Optional UTF-8 log file (parent directories are created)

    Returns:
        The "deployenhance" logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(show_path=False)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(fmt=DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
        )
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    return logger
