"""Logging setup shared by the app, scripts and the resolver.

Console output always; an optional daily file under ``log_dir`` that keeps
DEBUG records regardless of the console level.
"""
from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "student_affairs"

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> logging.Logger:
    """Attach handlers to the package root logger.

    Safe to call more than once: existing handlers are replaced.

    Args:
        level: Console log level name (DEBUG, INFO, WARNING, ...)
        log_dir: Directory for the daily log file; no file handler when None
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_dir else getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    console_handler.setFormatter(logging.Formatter(fmt=_CONSOLE_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"student_affairs_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt=_FILE_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package root logger.

    Module names such as ``student_affairs.identity.service`` are already
    children; anything else is nested under the root name.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    short = name.rsplit("student_affairs.", 1)[-1]
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{short}")
