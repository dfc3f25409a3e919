# Filename: cli.py
# Author: Rich Lewis @RichLewis007
# Description: Command-line interface for saferm. Parses arguments, moves each path into the
#              trash directory, optionally empties the trash, and maps failures to exit codes.

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __author__, __version__
from .models.errors import HomeDirectoryUnresolvable, TrashRootError
from .services import config as config_service
from .services import logger as logger_service
from .services.formatting import EMPTIED_MESSAGE, format_error, format_removed, format_summary
from .services.trash import empty_trash_root, ensure_trash_root
from .workers.remove_worker import RemoveOutcome, RemoveWorker

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    # Create and configure the command-line argument parser.
    parser = argparse.ArgumentParser(
        prog="saferm",
        description="A cross platform, safe alternative to rm.",
        epilog=f"Files are moved to ~/{config_service.TRASH_DIRNAME}. Written by {__author__}.",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Files or folders to trash.")
    parser.add_argument(
        "-e",
        "--empty",
        action="store_true",
        help="Empty the trash after moving any given paths into it.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level (default: %(default)s).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _print_outcome(index: int, total: int, outcome: RemoveOutcome) -> None:
    # Report a single path as soon as it has been handled.
    if outcome.error is None:
        print(format_removed(outcome.source))
    else:
        print(format_error(outcome.error), file=sys.stderr)


def run(paths: list[str], *, empty: bool, trash_root: Path) -> int:
    """Trash ``paths`` in order, then empty the trash if ``empty`` is set.

    Per-path failures are reported and skipped; they make the exit status 1 once
    the whole run has finished. Trash directory failures stop the run at once.
    """
    try:
        ensure_trash_root(trash_root)
    except TrashRootError as exc:
        print(format_error(exc), file=sys.stderr)
        return EXIT_FAILURE

    worker = RemoveWorker(paths, trash_root=trash_root, on_outcome=_print_outcome)
    result = worker.start()
    if result.failed and len(result.outcomes) > 1:
        print(format_summary(len(result.removed), len(result.failed)), file=sys.stderr)

    if empty:
        try:
            empty_trash_root(trash_root)
        except TrashRootError as exc:
            print(format_error(exc), file=sys.stderr)
            return EXIT_FAILURE
        print(EMPTIED_MESSAGE)

    return EXIT_FAILURE if result.failed else EXIT_OK


def main(argv: list[str] | None = None) -> int:
    # Entry point for the saferm console script.
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.paths and not args.empty:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    try:
        trash_root = config_service.trash_root_path()
    except HomeDirectoryUnresolvable as exc:
        print(format_error(exc), file=sys.stderr)
        return EXIT_FAILURE

    log_path = logger_service.configure(log_level=args.log_level)
    logger.debug("Starting saferm with argv=%s, logging to %s", argv, log_path)

    return run(args.paths, empty=args.empty, trash_root=trash_root)


if __name__ == "__main__":
    raise SystemExit(main())
