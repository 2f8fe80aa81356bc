# === FILE: link_scout/logger.py ===
"""Logging setup for LinkScout.

All modules log through the ``LinkScout`` logger or its children
(``LinkScout.crawler`` and so on)::

    from link_scout.logger import get_logger
    log = get_logger("crawler")

The CLI calls :func:`init_logging` once with the level and optional log file
chosen by the user; importing this module already gives console output at
INFO so library use and tests see progress lines too.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import IO, List, Optional, Union

LOGGER_NAME = "LinkScout"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

#: rotation policy for ``--log-file``
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def _build_handlers(
    log_file: Optional[Union[str, Path]],
    fmt: str,
    stream: Optional[IO[str]],
) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt)
    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                str(log_file),
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    *,
    level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_FORMAT,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Install fresh handlers on the project logger and return it.

    Previous handlers are closed, so calling this repeatedly (CLI runs,
    tests) never duplicates output or leaks open log files.
    """
    root = logging.getLogger(LOGGER_NAME)
    for old in root.handlers[:]:
        root.removeHandler(old)
        old.close()

    root.setLevel(_resolve_level(level))
    for handler in _build_handlers(log_file, log_format, stream):
        root.addHandler(handler)
    root.propagate = False
    return root


def init_logging(level: Union[int, str] = "INFO", log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Entry point used by the CLI."""
    return configure(level=level, log_file=log_file)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """``LinkScout`` itself, or ``LinkScout.<name>`` for a component."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)


logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "get_logger", "LOGGER_NAME"]
