# Filename: config.py
# Author: Rich Lewis @RichLewis007
# Description: Configuration helpers for saferm. Resolves the user's home directory, the trash
#              directory beneath it, and the per-user application directories used for logs.

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import PlatformDirs

from saferm.models.errors import HomeDirectoryUnresolvable

APP_NAME = "saferm"
ORG_NAME = "Rich Lewis"

TRASH_DIRNAME = ".trash"
LOG_FILENAME = "saferm.log"

logger = logging.getLogger(__name__)


def resolve_home() -> Path:
    # Return the current user's home directory or raise if the platform cannot supply one.
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirectoryUnresolvable() from exc
    return home


def trash_root_path(home: Path | None = None) -> Path:
    """Return the trash directory, ``<home>/.trash``.

    ``home`` may be injected (tests do this); otherwise it is resolved from the
    environment with :func:`resolve_home`. Nothing is created on disk.
    """
    if home is None:
        home = resolve_home()
    return home / TRASH_DIRNAME


def ensure_app_dirs() -> Path:
    # Ensure the log directory exists and return it.
    dirs = PlatformDirs(appname=APP_NAME, appauthor=ORG_NAME)
    log_path = Path(dirs.user_log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    return log_path
