"""Saved-record format: one task per line.

    T | <0|1> | <description>
    D | <0|1> | <description> | <yyyy-mm-dd>
    E | <0|1> | <description> | <start> | <end>

The completion field is complete only when it is exactly ``1``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Literal

from tally.errors import CorruptRecordError
from tally.tasks import RECORD_DELIMITER, Deadline, Event, Task, TaskType, Todo, parse_date

logger = logging.getLogger(__name__)

CorruptPolicy = Literal["skip", "abort"]

_MIN_FIELDS = 3


def parse_record(line: str) -> Task:
    """Parse one record line back into a task.

    Raises:
        CorruptRecordError: If fields are missing, the type tag is unknown
            or the description is empty.
        InvalidDateError: If a deadline's date is not YYYY-MM-DD.
    """
    fields = line.strip().split(RECORD_DELIMITER)
    if len(fields) < _MIN_FIELDS:
        raise CorruptRecordError(f"Expected at least {_MIN_FIELDS} fields, got {len(fields)}.")

    tag, done_flag, description = fields[0], fields[1], fields[2]
    if not description.strip():
        raise CorruptRecordError("Missing task description.")

    try:
        task_type = TaskType(tag)
    except ValueError:
        raise CorruptRecordError(f"Unknown task type {tag!r}.") from None

    expected = _MIN_FIELDS + task_type.field_count - 1
    if len(fields) < expected:
        raise CorruptRecordError(
            f"A {task_type.name.lower()} record needs {expected} fields, got {len(fields)}."
        )

    task: Task
    if task_type is TaskType.TODO:
        task = Todo(description)
    elif task_type is TaskType.DEADLINE:
        task = Deadline(description, parse_date(fields[3]))
    else:
        task = Event(description, fields[3], fields[4])

    if done_flag == "1":
        task.mark_done()

    return task


def load_records(
    lines: Iterable[str],
    on_corrupt: CorruptPolicy = "skip",
) -> tuple[list[Task], list[CorruptRecordError]]:
    """Parse every record of a task file.

    Blank lines are ignored. With ``skip``, corrupt lines are logged and
    left out; with ``abort``, the first corrupt line is raised.

    Args:
        lines: Lines of the task file.
        on_corrupt: What to do with a line that cannot be parsed.

    Returns:
        (tasks, errors) where each error carries its 1-based line number.
    """
    tasks: list[Task] = []
    errors: list[CorruptRecordError] = []

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            tasks.append(parse_record(line))
        except CorruptRecordError as e:
            e.line_number = line_number
            if on_corrupt == "abort":
                raise
            logger.warning("Skipping corrupt record: %s", e)
            errors.append(e)

    return tasks, errors
