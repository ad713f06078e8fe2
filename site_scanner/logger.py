# === FILE: site_scanner/logger.py ===
"""Project logger ``SiteScanner``.

Core modules log through :data:`logger`; the CLI reconfigures it from
``--log-level`` / ``--log-file``. Records go to stderr because stdout carries
the per-page progress lines, and optionally to a rotating file.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SiteScanner"

_LevelT = Union[int, str]


def _stderr_handler(fmt: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: _LevelT = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Set level and handlers of the ``SiteScanner`` logger.

    With *replace_handlers* the previous handlers are closed and removed.
    """
    scanner_logger = logging.getLogger(LOGGER_NAME)
    scanner_logger.setLevel(level)

    if replace_handlers:
        for handler in list(scanner_logger.handlers):
            handler.close()
        scanner_logger.handlers.clear()

    scanner_logger.addHandler(_stderr_handler(log_format))
    if log_file is not None:
        scanner_logger.addHandler(_file_handler(log_file, log_format))

    scanner_logger.propagate = False
    return scanner_logger


def init_logging(
    level: _LevelT = "WARNING", log_file: str | Path | None = None
) -> logging.Logger:
    return configure(level=level, log_file=log_file, replace_handlers=True)


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "LOGGER_NAME", "DEFAULT_FORMAT"]
