"""Flat-file persistence for the task list."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from tally.config import DATA_FILE
from tally.errors import CorruptRecordError, StorageError
from tally.records import CorruptPolicy, load_records
from tally.tasks import Task

logger = logging.getLogger(__name__)


class FileStorage:
    """Reads and rewrites the whole task file, one record per line."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else DATA_FILE

    def read_lines(self) -> list[str]:
        """Read all lines of the task file; a missing file has none."""
        if not self.path.exists():
            return []

        try:
            return self.path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {self.path}: {e}", original_error=e) from e

    def write_lines(self, lines: Sequence[str]) -> None:
        """Replace the task file with the given lines."""
        content = "".join(f"{line}\n" for line in lines)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save tasks to %s: %s", self.path, e)
            raise StorageError(
                f"Could not save tasks to {self.path}: {e}", original_error=e
            ) from e

    def load(
        self, on_corrupt: CorruptPolicy = "skip"
    ) -> tuple[list[Task], list[CorruptRecordError]]:
        """Load tasks from the file.

        Returns:
            (tasks, errors) - see records.load_records.
        """
        tasks, errors = load_records(self.read_lines(), on_corrupt)
        logger.info(
            "Loaded %d task(s) from %s, skipped %d corrupt line(s)",
            len(tasks),
            self.path,
            len(errors),
        )
        return tasks, errors

    def save(self, tasks: Sequence[Task]) -> None:
        """Rewrite the file with every task."""
        self.write_lines([task.serialize() for task in tasks])
        logger.debug("Saved %d task(s) to %s", len(tasks), self.path)
