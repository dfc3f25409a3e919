# Filename: trash.py
# Author: Rich Lewis @RichLewis007
# Description: Utilities for moving files into the saferm trash directory. Computes trash
#              destinations, clears colliding entries, renames sources into place, and
#              creates or empties the trash directory itself.

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from saferm.models.classified_path import ClassifiedPath, PathKind
from saferm.models.errors import (
    DirectoryCreateError,
    DirectoryRemoveError,
    InvalidNameError,
    MoveFailedError,
    PathNotFoundError,
)

logger = logging.getLogger(__name__)

_UNUSABLE_NAMES = frozenset({"", ".", ".."})


def trash_destination(source: str, trash_root: Path) -> Path:
    # Return trash_root / basename(source), rejecting paths without a usable final component.
    name = Path(source).name
    if not source or name in _UNUSABLE_NAMES:
        raise InvalidNameError(source)
    return trash_root / name


def relocate(entry: ClassifiedPath, trash_root: Path) -> Path:
    """Move a classified path into ``trash_root`` and return its new location.

    Files and directories share one algorithm: compute the destination from
    the basename, clear whatever already sits there (best effort), then rename
    the source onto it. The rename is the only step whose failure is reported.

    Raises:
        PathNotFoundError: ``entry`` is absent; nothing on disk is touched.
        InvalidNameError: the path has no usable basename.
        MoveFailedError: the rename itself failed.
    """
    if entry.kind is PathKind.ABSENT:
        raise PathNotFoundError(entry.source)

    destination = trash_destination(entry.source, trash_root)

    if _is_same_entry(entry.path, destination):
        logger.info("%s already lives in the trash at %s", entry.source, destination)
        return destination

    # A source nested inside the entry it replaces (trash/proj/x/proj) is deleted
    # along with that entry, and the rename below then fails.
    _clear_destination(destination)

    try:
        os.rename(entry.path, destination)
    except OSError as exc:
        logger.debug("Rename of %s to %s failed: %s", entry.source, destination, exc)
        raise MoveFailedError(entry.source, destination) from exc

    logger.info("Moved %s %s to %s", entry.kind.value, entry.source, destination)
    return destination


def _clear_destination(destination: Path) -> None:
    # Remove whatever sits at destination. Failures are logged and otherwise ignored.
    try:
        if destination.is_dir() and not destination.is_symlink():
            shutil.rmtree(destination)
        elif os.path.lexists(destination):
            destination.unlink()
        else:
            return
    except OSError as exc:
        logger.debug("Could not clear existing trash entry %s: %s", destination, exc)
        return
    logger.debug("Replaced existing trash entry %s", destination)


def _is_same_entry(source: Path, destination: Path) -> bool:
    # Return True when source and destination are the same directory entry. Hard links
    # living outside the trash share an inode with it but are not the same entry.
    try:
        return os.path.samestat(os.lstat(source), os.lstat(destination)) and os.path.samestat(
            os.stat(source.parent), os.stat(destination.parent)
        )
    except (OSError, ValueError):
        return False


def ensure_trash_root(trash_root: Path) -> None:
    # Create the trash directory and any missing parents. Safe to call repeatedly.
    try:
        trash_root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(trash_root) from exc
    logger.debug("Trash directory ready at %s", trash_root)


def empty_trash_root(trash_root: Path) -> None:
    """Delete the trash directory with everything in it, then recreate it empty.

    When the trash directory is a symlink, the directory it points to is
    emptied and the link is kept. If deletion fails the directory is not
    recreated, so the caller sees the failure instead of a half-emptied trash
    that looks fine.
    """
    try:
        target = trash_root.resolve() if trash_root.is_symlink() else trash_root
        shutil.rmtree(target)
    except (OSError, RuntimeError) as exc:
        raise DirectoryRemoveError(trash_root) from exc
    logger.info("Removed trash directory %s", target)
    ensure_trash_root(target)
