# Filename: formatting.py
# Author: Rich Lewis @RichLewis007
# Description: Formatting helpers for user-facing messages. Builds the confirmation and error
#              lines printed for each path handled by the command-line tool.

from __future__ import annotations

from typing import Final

from saferm.models.errors import SafermError

_ERROR_PREFIX: Final[str] = "Error: "
EMPTIED_MESSAGE: Final[str] = "Emptied trash"


def format_removed(source: str) -> str:
    """Return the confirmation line for a path that was moved to the trash.

    The line names the path exactly as the user typed it, never the location
    inside the trash.
    """
    return f'Removed "{source}"'


def format_error(error: SafermError) -> str:
    # Return the error line for a failed path or a fatal trash failure.
    return f"{_ERROR_PREFIX}{error}"


def format_summary(removed: int, failed: int) -> str:
    # Return a one-line tally for a multi-path batch that had failures.
    return f"{removed} of {removed + failed} paths moved to trash, {failed} failed"


__all__ = ["EMPTIED_MESSAGE", "format_error", "format_removed", "format_summary"]
