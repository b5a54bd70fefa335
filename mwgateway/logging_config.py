#!/usr/bin/env python3
"""
Logging configuration for mwgateway tools.

Sets up logging to the console and, optionally, to a rotating log file.

Usage:
    from mwgateway.logging_config import setup_logging

    logger = setup_logging(
        name="page-tool",
        wiki_id="examplewiki",
        log_dir="/var/log",  # Optional, defaults to ./logs
    )
    logger.info("Preparing edit...")
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, TextIO, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_level(value: Union[int, str]) -> int:
    """
    Turn a level name ("debug", "WARNING") or number ("10", 10) into an int.

    Raises:
        ValueError: If the name is not a known logging level
    """
    if isinstance(value, int):
        return value
    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def setup_logging(
    name: str,
    wiki_id: Optional[str] = None,
    log_dir: Optional[str] = None,
    level: Union[int, str] = logging.INFO,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 5,
    console: bool = True,
    stream: Optional[TextIO] = None,
    log_file: bool = True,
) -> logging.Logger:
    """
    Set up logging to console and file.

    Args:
        name: Logger name (used in log filename)
        wiki_id: Wiki identifier for log filename (e.g., "examplewiki")
        log_dir: Directory for log files (default: ./logs or LOG_DIR env var)
        level: Logging level, as a number or a name (default: INFO)
        max_bytes: Max log file size before rotation
        backup_count: Number of rotated log files to keep
        console: Whether to also log to console
        stream: Console stream (default: stderr, so stdout stays clean for output)
        log_file: Whether to write a log file at all

    Returns:
        Configured logger instance

    Log files are named: {wiki_id}-{name}.log (e.g., examplewiki-page-tool.log)
    """
    level = parse_level(level)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear any existing handlers (for re-initialization)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    log_path = None
    if log_file:
        log_dir_path = Path(log_dir) if log_dir is not None else get_log_dir()
        log_dir_path.mkdir(parents=True, exist_ok=True)

        log_filename = f"{wiki_id}-{name}.log" if wiki_id else f"{name}.log"
        log_path = log_dir_path / log_filename

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(stream or sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_path is not None:
        logger.debug(f"Logging initialized: {log_path}")
    return logger


def get_log_dir(default: str = "./logs") -> Path:
    """
    Get the log directory from environment or default.

    Checks LOG_DIR environment variable first.
    """
    return Path(os.environ.get("LOG_DIR", default))
