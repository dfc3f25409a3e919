# Filename: logger.py
# Author: Rich Lewis @RichLewis007
# Description: Logging configuration utilities. Sets up a rotating debug log file plus a
#              console handler whose level is chosen on the command line.

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from .config import LOG_FILENAME, ensure_app_dirs

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _get_log_path() -> Path:
    # Return the path to the rotating log file, creating folders as needed.
    return ensure_app_dirs() / LOG_FILENAME


def configure(*, log_level: str = "WARNING") -> Path | None:
    # Configure the root logger with rotating file and console handlers. Returns the log
    # file path, or None when the log file could not be opened and only the console is used.
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)

    log_path: Path | None = None
    file_handler: logging.Handler | None = None
    file_error: OSError | None = None
    try:
        log_path = _get_log_path()
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=2 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    except OSError as exc:
        log_path = None
        file_error = exc
    else:
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)

    # Console output goes to stderr so it never mixes with per-path results.
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    # Avoid duplicate handlers when reconfiguring.
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    if file_handler is not None:
        root.addHandler(file_handler)
    root.addHandler(console_handler)

    if file_error is not None:
        logging.getLogger(__name__).warning(
            "Could not open log file, logging to the console only: %s", file_error
        )
    return log_path
