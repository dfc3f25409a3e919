# Filename: remove_worker.py
# Author: Rich Lewis @RichLewis007
# Description: Batch worker that moves paths into the trash one by one. Recovers from per-path
#              failures so the rest of the batch still runs, and reports each outcome in order.

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from saferm.models.classified_path import classify
from saferm.models.errors import RelocationError
from saferm.services.trash import relocate

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RemoveOutcome:
    # Result of trashing a single path.

    source: str
    destination: Path | None = None
    error: RelocationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class RemoveResult:
    # Ordered outcomes of a batch, with convenience views for successes and failures.

    outcomes: list[RemoveOutcome] = field(default_factory=list)

    @property
    def removed(self) -> list[str]:
        return [outcome.source for outcome in self.outcomes if outcome.ok]

    @property
    def failed(self) -> list[str]:
        return [outcome.source for outcome in self.outcomes if not outcome.ok]


OutcomeCallback = Callable[[int, int, RemoveOutcome], None]


class RemoveWorker:
    # Moves files and folders to the trash sequentially, in the order given.

    def __init__(
        self,
        paths: Iterable[str],
        *,
        trash_root: Path,
        on_outcome: OutcomeCallback | None = None,
    ) -> None:
        self._paths = list(paths)
        self._trash_root = trash_root
        self._on_outcome = on_outcome

    def start(self) -> RemoveResult:
        # Trash each requested path, reporting every outcome as soon as it is known.
        result = RemoveResult()
        total = len(self._paths)

        for index, source in enumerate(self._paths, start=1):
            outcome = self._remove_one(source)
            result.outcomes.append(outcome)
            if self._on_outcome is not None:
                self._on_outcome(index, total, outcome)

        logger.debug(
            "Batch finished: %d removed, %d failed",
            len(result.removed),
            len(result.failed),
        )
        return result

    def _remove_one(self, source: str) -> RemoveOutcome:
        entry = classify(source)
        try:
            destination = relocate(entry, self._trash_root)
        except RelocationError as exc:
            logger.info("Failed to trash %r: %s", source, exc)
            return RemoveOutcome(source=source, error=exc)
        return RemoveOutcome(source=source, destination=destination)
