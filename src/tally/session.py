"""Input loop: parse each line, run it, recover from user errors."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Protocol

from tally.commands import Bye, TaskSink, execute
from tally.errors import TallyError
from tally.parser import parse
from tally.task_list import TaskList

logger = logging.getLogger(__name__)


class SessionDisplay(Protocol):
    """Display sink that can also report errors."""

    def show(self, lines: Sequence[str]) -> None: ...

    def error(self, message: str) -> None: ...


class Session:
    """Runs commands one at a time against a single task list.

    Each line is parsed and fully executed before the next one is read.
    A TallyError rejects the line, shows its message and leaves the loop
    running.
    """

    def __init__(self, tasks: TaskList, storage: TaskSink, display: SessionDisplay) -> None:
        self.tasks = tasks
        self.storage = storage
        self.display = display

    def handle(self, line: str) -> bool:
        """Handle one input line.

        Returns:
            False once the session should stop, True otherwise.
        """
        try:
            command = parse(line)
            execute(command, self.tasks, self.display, self.storage)
        except TallyError as e:
            logger.info("Rejected %r: %s", line, e.message)
            self.display.error(e.message)
            return True

        return not isinstance(command, Bye)

    def run(self, read_line: Callable[[], str]) -> None:
        """Read and handle lines until ``bye`` or end of input."""
        while True:
            try:
                line = read_line()
            except EOFError:
                logger.debug("End of input")
                return

            if not line.strip():
                continue

            if not self.handle(line):
                return
