"""Command values and their execution.

A command is a plain frozen dataclass carrying only what it needs. The
effect of running one lives in a handler function, looked up by the
command's type in ``_HANDLERS``:

    ListTasks      - show every task
    FindTasks      - show tasks whose description contains a query
    SetCompletion  - mark or unmark a task, then save
    DeleteTask     - remove a task, then save
    AddTask        - build and append a task, then save
    Bye            - say goodbye; the session stops after it

Task numbers are 1-based as typed; handlers translate them to list
indices. Mutations happen before saving and are not rolled back if the
save fails.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol, Union

from tally.errors import InvalidDateError, InvalidFormatError
from tally.task_list import TaskList
from tally.tasks import FIELD_SEPARATOR, Task, TaskType, build_task

logger = logging.getLogger(__name__)

INVALID_DEADLINE_FORMAT_ERROR_MSG = (
    "A description and deadline (in yyyy-mm-dd format) is required for creating a deadline."
)


class Display(Protocol):
    """Somewhere to show lines of output."""

    def show(self, lines: Sequence[str]) -> None: ...


class TaskSink(Protocol):
    """Somewhere to persist the whole task list."""

    def save(self, tasks: Sequence[Task]) -> None: ...


@dataclass(frozen=True)
class ListTasks:
    """Show every task."""


@dataclass(frozen=True)
class FindTasks:
    """Show tasks whose description contains ``query``."""

    query: str


@dataclass(frozen=True)
class SetCompletion:
    """Mark task ``number`` as complete or incomplete."""

    number: int
    completed: bool


@dataclass(frozen=True)
class DeleteTask:
    """Remove task ``number``."""

    number: int


@dataclass(frozen=True)
class AddTask:
    """Create a task of ``variant`` from the raw ``fields`` typed by the user."""

    variant: TaskType
    fields: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.fields) != self.variant.field_count:
            raise ValueError(
                f"{self.variant.name} takes {self.variant.field_count} field(s), "
                f"got {len(self.fields)}"
            )


@dataclass(frozen=True)
class Bye:
    """End the session."""


Command = Union[ListTasks, FindTasks, SetCompletion, DeleteTask, AddTask, Bye]


def execute(command: Command, tasks: TaskList, display: Display, storage: TaskSink) -> None:
    """Run a command against a task list."""
    handler = _HANDLERS[type(command)]
    handler(command, tasks, display, storage)


def _numbered(number: int, task: Task) -> str:
    return f"{number}.{task.render()}"


def _count_line(tasks: TaskList) -> str:
    noun = "task" if len(tasks) == 1 else "tasks"
    return f"Now you have {len(tasks)} {noun} in the list."


def _list(command: ListTasks, tasks: TaskList, display: Display, storage: TaskSink) -> None:
    if not len(tasks):
        display.show(["Your task list is empty."])
        return
    display.show([_numbered(n, task) for n, task in enumerate(tasks, start=1)])


def _find(command: FindTasks, tasks: TaskList, display: Display, storage: TaskSink) -> None:
    matches = tasks.find(command.query)
    if not matches:
        display.show(["No matching tasks found."])
        return
    lines = ["Here are the matching tasks in your list:"]
    lines.extend(_numbered(n, task) for n, task in matches)
    display.show(lines)


def _set_completion(
    command: SetCompletion, tasks: TaskList, display: Display, storage: TaskSink
) -> None:
    task = tasks.get(command.number - 1)
    if command.completed:
        task.mark_done()
        header = "Okay! I've marked this task as complete:"
    else:
        task.mark_undone()
        header = "Okay! I've marked this task as incomplete:"
    storage.save(tasks.all())
    display.show([header, task.render()])


def _delete(command: DeleteTask, tasks: TaskList, display: Display, storage: TaskSink) -> None:
    task = tasks.remove_at(command.number - 1)
    storage.save(tasks.all())
    display.show(["Noted. I've removed this task:", task.render(), _count_line(tasks)])


def _add(command: AddTask, tasks: TaskList, display: Display, storage: TaskSink) -> None:
    if any(FIELD_SEPARATOR in value for value in command.fields):
        raise InvalidFormatError(f"Task details cannot contain '{FIELD_SEPARATOR}'.")

    try:
        task = build_task(command.variant, command.fields)
    except InvalidDateError as e:
        logger.info("Rejected deadline date %r", e.value)
        raise InvalidFormatError(INVALID_DEADLINE_FORMAT_ERROR_MSG) from e

    tasks.append(task)
    storage.save(tasks.all())
    display.show(["Got it. I've added this task:", task.render(), _count_line(tasks)])


def _bye(command: Bye, tasks: TaskList, display: Display, storage: TaskSink) -> None:
    display.show(["Bye. Hope to see you again soon!"])


_HANDLERS: dict[type, Callable[..., None]] = {
    ListTasks: _list,
    FindTasks: _find,
    SetCompletion: _set_completion,
    DeleteTask: _delete,
    AddTask: _add,
    Bye: _bye,
}
