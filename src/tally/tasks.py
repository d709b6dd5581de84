"""Task model for tally.

Three kinds of task share a description and a completion flag:

    Todo      - description only
    Deadline  - description and a calendar date
    Event     - description and free-text start and end markers

Each task knows how to render itself for the console and how to
serialise itself as one line of the task file.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import ClassVar

from tally.errors import InvalidDateError

# Separator between fields of a saved record. Task fields never contain
# FIELD_SEPARATOR.
FIELD_SEPARATOR = "|"
RECORD_DELIMITER = f" {FIELD_SEPARATOR} "

DATE_DISPLAY_FORMAT = "%b %d %Y"

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class TaskType(Enum):
    """Kinds of task, valued by their record type tag."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def field_count(self) -> int:
        """Number of user-supplied fields needed to build this kind of task."""
        return {"T": 1, "D": 2, "E": 3}[self.value]


def parse_date(text: str) -> date:
    """Parse a strict YYYY-MM-DD date.

    Raises:
        InvalidDateError: If the text is not a zero-padded calendar date.
    """
    value = text.strip()
    if not _ISO_DATE.fullmatch(value):
        raise InvalidDateError(value)
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise InvalidDateError(value) from e


@dataclass
class Task:
    """Base task: a description and a completion flag."""

    task_type: ClassVar[TaskType]

    description: str
    done: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        if not self.description.strip():
            raise ValueError("A task description cannot be empty")

    def mark_done(self) -> None:
        """Mark the task as complete."""
        self.done = True

    def mark_undone(self) -> None:
        """Mark the task as incomplete."""
        self.done = False

    def render(self) -> str:
        """One-line console rendering, e.g. ``[T][X] buy milk``."""
        status = "X" if self.done else " "
        return f"[{self.task_type.value}][{status}] {self.description}{self._render_details()}"

    def serialize(self) -> str:
        """One line of the task file, e.g. ``T | 1 | buy milk``."""
        fields = [self.task_type.value, "1" if self.done else "0", self.description]
        fields.extend(self._extra_fields())
        return RECORD_DELIMITER.join(fields)

    def _render_details(self) -> str:
        return ""

    def _extra_fields(self) -> list[str]:
        return []


@dataclass
class Todo(Task):
    """A task with only a description."""

    task_type: ClassVar[TaskType] = TaskType.TODO


@dataclass
class Deadline(Task):
    """A task that must be done by a date."""

    task_type: ClassVar[TaskType] = TaskType.DEADLINE

    by: date

    def _render_details(self) -> str:
        return f" (by: {self.by.strftime(DATE_DISPLAY_FORMAT)})"

    def _extra_fields(self) -> list[str]:
        return [self.by.isoformat()]


@dataclass
class Event(Task):
    """A task spanning a start and an end, both kept as typed."""

    task_type: ClassVar[TaskType] = TaskType.EVENT

    start: str
    end: str

    def _render_details(self) -> str:
        return f" (from: {self.start} to: {self.end})"

    def _extra_fields(self) -> list[str]:
        return [self.start, self.end]


def build_task(variant: TaskType, fields: Sequence[str]) -> Task:
    """Build a new, incomplete task from user-supplied fields.

    A deadline's date is parsed here rather than by the command parser.

    Raises:
        InvalidDateError: If a deadline's date is not YYYY-MM-DD.
        ValueError: If the field count does not match the variant.
    """
    if len(fields) != variant.field_count:
        raise ValueError(
            f"{variant.name.lower()} needs {variant.field_count} field(s), got {len(fields)}"
        )

    if variant is TaskType.TODO:
        return Todo(fields[0])
    elif variant is TaskType.DEADLINE:
        return Deadline(fields[0], parse_date(fields[1]))
    else:
        return Event(fields[0], fields[1], fields[2])
