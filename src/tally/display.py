"""Console output for tally."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

GREETING = ["Hello! I'm tally.", "What can I do for you?"]


class ConsoleDisplay:
    """Shows lines on a rich console.

    Lines are printed as plain text: task renderings contain square
    brackets that rich would otherwise read as markup.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console(highlight=False)

    def show(self, lines: Sequence[str]) -> None:
        """Show a block of lines between rules."""
        self.console.rule(style="dim")
        for line in lines:
            self.console.print(Text(line))
        self.console.rule(style="dim")

    def error(self, message: str) -> None:
        """Show an error message in red."""
        self.console.rule(style="dim")
        self.console.print(Text(message, style="red"))
        self.console.rule(style="dim")

    def greet(self) -> None:
        self.show(GREETING)
