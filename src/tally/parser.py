"""Command parser: one line of user input to a Command.

Grammar (verbs are case-insensitive, markers are not):

    list
    find <query>
    mark <number> / unmark <number> / delete <number>
    todo <description>
    deadline <description> /by <yyyy-mm-dd>
    event <description> /from <start> /to <end>
    bye

Splitting on the ``/by``, ``/from`` and ``/to`` markers is purely textual:
a description that itself contains a marker will be split at it.
"""

from __future__ import annotations

import re

from tally.commands import (
    INVALID_DEADLINE_FORMAT_ERROR_MSG,
    AddTask,
    Bye,
    Command,
    DeleteTask,
    FindTasks,
    ListTasks,
    SetCompletion,
)
from tally.errors import InvalidFormatError, UnknownCommandError
from tally.tasks import TaskType

INVALID_NUMBER_ERROR_MSG = "Did you enter a valid number?"
INVALID_TODO_FORMAT_ERROR_MSG = "A description is required for creating a to-do."
INVALID_EVENT_FORMAT_ERROR_MSG = (
    "A description, start time and end time is required for creating an event."
)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_EVENT_MARKERS = re.compile(r"/from|/to")


def parse(line: str) -> Command:
    """Parse one input line into a Command.

    Raises:
        UnknownCommandError: If the verb is not recognised.
        InvalidFormatError: If the verb's arguments are malformed.
    """
    verb, _, rest = line.partition(" ")
    verb = verb.lower()
    argument = rest.strip()

    if verb == "list":
        return ListTasks()
    elif verb == "find":
        return FindTasks(argument)
    elif verb == "mark":
        return SetCompletion(_parse_number(argument), True)
    elif verb == "unmark":
        return SetCompletion(_parse_number(argument), False)
    elif verb == "delete":
        return DeleteTask(_parse_number(argument))
    elif verb == "todo":
        if not argument:
            raise InvalidFormatError(INVALID_TODO_FORMAT_ERROR_MSG)
        return AddTask(TaskType.TODO, (argument,))
    elif verb == "deadline":
        parts = _split_required(argument.split("/by", 1), 2, INVALID_DEADLINE_FORMAT_ERROR_MSG)
        return AddTask(TaskType.DEADLINE, parts)
    elif verb == "event":
        parts = _split_required(
            _EVENT_MARKERS.split(argument, maxsplit=2), 3, INVALID_EVENT_FORMAT_ERROR_MSG
        )
        return AddTask(TaskType.EVENT, parts)
    elif verb == "bye":
        return Bye()
    else:
        raise UnknownCommandError(verb)


def _parse_number(argument: str) -> int:
    """Parse a base-10 task number."""
    if not _INTEGER.fullmatch(argument):
        raise InvalidFormatError(INVALID_NUMBER_ERROR_MSG)
    try:
        return int(argument)
    except ValueError:
        # Beyond the interpreter's int string conversion limit
        raise InvalidFormatError(INVALID_NUMBER_ERROR_MSG) from None


def _split_required(parts: list[str], expected: int, message: str) -> tuple[str, ...]:
    """Trim split parts, requiring ``expected`` non-empty ones."""
    if len(parts) < expected:
        raise InvalidFormatError(message)

    trimmed = tuple(part.strip() for part in parts)
    if any(not part for part in trimmed):
        raise InvalidFormatError(message)
    return trimmed
