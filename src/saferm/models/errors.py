# Filename: errors.py
# Author: Rich Lewis @RichLewis007
# Description: Exception hierarchy for trash operations. Splits errors into per-path
#              relocation failures, which a batch recovers from, and fatal trash-root failures.

from __future__ import annotations

from pathlib import Path


class SafermError(Exception):
    # Base class for every error raised by saferm.
    pass


# ----------------------------------------------------------------------
# Per-path errors (recoverable by the batch loop)


class RelocationError(SafermError):
    # A single path could not be moved to the trash.

    def __init__(self, source: str, message: str) -> None:
        super().__init__(message)
        self.source = source


class PathNotFoundError(RelocationError):
    def __init__(self, source: str) -> None:
        super().__init__(source, f"Could not find file {source!r}")


class InvalidNameError(RelocationError):
    def __init__(self, source: str) -> None:
        super().__init__(source, f"Could not determine a file name for {source!r}")


class MoveFailedError(RelocationError):
    def __init__(self, source: str, destination: Path) -> None:
        super().__init__(source, f"Failed to move {source!r} to {str(destination)!r}")
        self.destination = destination


# ----------------------------------------------------------------------
# Fatal errors (abort the whole run)


class TrashRootError(SafermError):
    # The trash directory itself could not be created or removed.

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class DirectoryCreateError(TrashRootError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Failed to create folder {str(path)!r}")


class DirectoryRemoveError(TrashRootError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Failed to remove folder {str(path)!r}")


class HomeDirectoryUnresolvable(SafermError):
    def __init__(self) -> None:
        super().__init__("Could not determine your home directory")


__all__ = [
    "DirectoryCreateError",
    "DirectoryRemoveError",
    "HomeDirectoryUnresolvable",
    "InvalidNameError",
    "MoveFailedError",
    "PathNotFoundError",
    "RelocationError",
    "SafermError",
    "TrashRootError",
]
