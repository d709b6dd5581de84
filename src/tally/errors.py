"""Error hierarchy for tally.

Every error a user can trigger derives from TallyError and carries a
message fit to be shown as-is. The session loop recovers TallyError and
keeps accepting input; anything else is a bug and propagates.
"""

from __future__ import annotations


class TallyError(Exception):
    """Base class for recoverable tally errors."""

    @property
    def message(self) -> str:
        """The user-facing message."""
        return str(self)


class UnknownCommandError(TallyError):
    """The verb of an input line is not recognised."""

    def __init__(self, verb: str = "") -> None:
        super().__init__("Sorry, I don't know what that means.")
        self.verb = verb


class InvalidFormatError(TallyError):
    """The verb is known but its arguments are malformed."""


class CorruptRecordError(TallyError):
    """A saved record cannot be turned back into a task.

    The line number is filled in by the file loader, which is the only
    place that knows it.
    """

    def __init__(self, reason: str, line_number: int | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return self.reason
        return f"Line {self.line_number}: {self.reason}"


class InvalidDateError(CorruptRecordError):
    """A date field is not a valid YYYY-MM-DD calendar date."""

    def __init__(self, value: str, line_number: int | None = None) -> None:
        super().__init__(f"Invalid date {value!r}, expected YYYY-MM-DD.", line_number)
        self.value = value


class IndexOutOfRangeError(TallyError, IndexError):
    """A task number does not refer to any task in the list."""

    def __init__(self, number: int, size: int) -> None:
        if size == 0:
            message = f"There is no task {number}, your task list is empty."
        else:
            message = f"There is no task {number}. Pick a number from 1 to {size}."
        super().__init__(message)
        self.number = number
        self.size = size


class StorageError(TallyError):
    """The task file could not be read or written."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.original_error = original_error
