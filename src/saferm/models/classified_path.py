# Filename: classified_path.py
# Author: Rich Lewis @RichLewis007
# Description: Path classification model. Inspects a user-supplied path and tags it as a
#              regular file, a directory, or absent, based on the filesystem's current state.

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path


class PathKind(enum.Enum):
    # What currently lives at a path.

    FILE = "file"
    DIRECTORY = "dir"
    ABSENT = "absent"


@dataclass(frozen=True, slots=True)
class ClassifiedPath:
    # A path string paired with the kind of entry found there.

    kind: PathKind
    source: str

    @property
    def path(self) -> Path:
        # Return the source as a Path object.
        return Path(self.source)


def classify(source: str) -> ClassifiedPath:
    """Classify ``source`` as a directory, a regular file, or absent.

    Directories win over files, and anything that cannot be stat'ed (missing
    paths, dangling symlinks, permission errors, embedded NUL bytes) is
    reported as absent. Symlinks are followed the way ``os.path.isdir`` and
    ``os.path.isfile`` follow them. This never raises.
    """
    if os.path.isdir(source):
        kind = PathKind.DIRECTORY
    elif os.path.isfile(source):
        kind = PathKind.FILE
    else:
        kind = PathKind.ABSENT
    return ClassifiedPath(kind=kind, source=source)


__all__ = ["ClassifiedPath", "PathKind", "classify"]
