"""CLI interface for tally."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from tally import __version__
from tally.commands import execute
from tally.config import TallyConfig
from tally.display import ConsoleDisplay
from tally.errors import CorruptRecordError, StorageError, TallyError
from tally.logging_setup import setup_logging
from tally.parser import parse
from tally.session import Session
from tally.storage import FileStorage
from tally.task_list import TaskList

console = Console(highlight=False)
logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tally")
@click.option(
    "--file",
    "-f",
    "data_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Task file to use instead of the configured one",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to config.json (default: .tally/config.json)",
)
@click.pass_context
def main(ctx: click.Context, data_file: Path | None, config_path: Path | None) -> None:
    """tally - keep track of todos, deadlines and events.

    Run without a subcommand to start an interactive session.

    \b
    Commands understood in a session:
      list
      find <query>
      mark <n> / unmark <n> / delete <n>
      todo <description>
      deadline <description> /by <yyyy-mm-dd>
      event <description> /from <start> /to <end>
      bye
    """
    ctx.ensure_object(dict)
    config = TallyConfig.load(config_path)
    if data_file is not None:
        config.storage.data_file = str(data_file)

    setup_logging(level=config.logging.level, log_file=config.logging.file)

    ctx.obj["config"] = config
    ctx.obj["storage"] = FileStorage(Path(config.storage.data_file))

    if ctx.invoked_subcommand is None:
        _run_interactive(ctx)


def _load_task_list(ctx: click.Context) -> TaskList:
    """Load the task list, exiting on an unreadable or corrupt file."""
    config: TallyConfig = ctx.obj["config"]
    storage: FileStorage = ctx.obj["storage"]

    try:
        tasks, errors = storage.load(config.storage.on_corrupt)
    except (StorageError, CorruptRecordError) as e:
        console.print(f"[red]Could not load tasks:[/red] {escape(e.message)}")
        ctx.exit(1)

    if errors:
        console.print(
            f"[yellow]Skipped {len(errors)} corrupt line(s) in {storage.path}.[/yellow] "
            "Run [cyan]tally check[/cyan] for details."
        )

    return TaskList(tasks)


def _run_interactive(ctx: click.Context) -> None:
    """Run an interactive session until bye or end of input."""
    config: TallyConfig = ctx.obj["config"]
    tasks = _load_task_list(ctx)
    display = ConsoleDisplay(console)

    if config.display.greet:
        display.greet()

    session = Session(tasks, ctx.obj["storage"], display)
    session.run(lambda: console.input("> "))


@main.command("do")
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def do_command(ctx: click.Context, words: tuple[str, ...]) -> None:
    """Run a single command and exit.

    \b
    Examples:
      tally do todo buy milk
      tally do deadline return book /by 2024-03-05
      tally do mark 2
    """
    tasks = _load_task_list(ctx)
    display = ConsoleDisplay(console)
    line = " ".join(words)

    try:
        execute(parse(line), tasks, display, ctx.obj["storage"])
    except TallyError as e:
        logger.info("Rejected %r: %s", line, e.message)
        display.error(e.message)
        ctx.exit(1)


@main.command("check")
@click.pass_context
def check_command(ctx: click.Context) -> None:
    """Check the task file for corrupt lines."""
    storage: FileStorage = ctx.obj["storage"]

    try:
        tasks, errors = storage.load("skip")
    except StorageError as e:
        console.print(f"[red]Could not read tasks:[/red] {escape(e.message)}")
        ctx.exit(1)

    if not errors:
        console.print(f"[green]✓[/green] {storage.path}: {len(tasks)} task(s), no problems found")
        return

    console.print(f"[red]✗[/red] {storage.path}: {len(errors)} corrupt line(s)")
    for error in errors:
        console.print(f"  [dim]•[/dim] {escape(error.message)}")
    ctx.exit(1)
