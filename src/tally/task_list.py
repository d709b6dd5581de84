"""Ordered, mutable list of tasks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from tally.errors import IndexOutOfRangeError
from tally.tasks import Task


class TaskList:
    """The tasks a session operates on, in insertion order.

    Indices passed to this class are 0-based. Out-of-range indices raise
    IndexOutOfRangeError; negative indices are rejected rather than
    counted from the end.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks) if tasks else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def append(self, task: Task) -> None:
        """Add a task to the end of the list."""
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        """Return the task at a 0-based index."""
        self._check_index(index)
        return self._tasks[index]

    def remove_at(self, index: int) -> Task:
        """Remove and return the task at a 0-based index."""
        self._check_index(index)
        return self._tasks.pop(index)

    def all(self) -> list[Task]:
        """Return a copy of every task, in order."""
        return list(self._tasks)

    def find(self, query: str) -> list[tuple[int, Task]]:
        """Find tasks whose description contains the query.

        Matching is a case-sensitive substring test, so an empty query
        matches every task.

        Returns:
            (1-based number, task) pairs in list order.
        """
        return [
            (number, task)
            for number, task in enumerate(self._tasks, start=1)
            if query in task.description
        ]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise IndexOutOfRangeError(index + 1, len(self._tasks))
