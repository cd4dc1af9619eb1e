from __future__ import annotations
import logging
from pathlib import Path

from .config import LOG_LEVEL

LOGGER_NAME = "pizza_sales"


def setup_logger(level: str | int | None = None, log_file: Path | None = None) -> logging.Logger:
    """
    Configure the package logger.

    - Console output, plus a file when ``log_file`` is given
    - Unified format with timestamp and level
    - Safe to call repeatedly: handlers are only added once
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level or LOG_LEVEL)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logger initialized")
    return logger
