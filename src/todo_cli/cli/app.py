"""Command line interface for todo-cli.

Four subcommands, each a short-lived process: load the task list, run
one operation, write the list back when it changed, print the result.

    todo add "Buy milk" --due "2025-06-05 18:30"
    todo list
    todo done 0
    todo delete 0
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.markup import escape

from todo_cli import __version__
from todo_cli.cli.render import EMPTY_MESSAGE, build_task_table
from todo_cli.config import TodoSettings, get_settings
from todo_cli.errors import TodoError
from todo_cli.logging import Loggers, bind_context, clear_context, configure_logging
from todo_cli.tasks.due import DUE_FORMATS_HELP
from todo_cli.tasks.manager import TaskManager
from todo_cli.tasks.store import TaskStore

logger = Loggers.cli()

app = typer.Typer(
    name="todo",
    help="A simple command-line ToDo app.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"todo-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Tasks file to use (overrides TODO_TASKS_FILE).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Track tasks with optional due dates, stored in a local JSON file."""
    settings = get_settings()
    if file is not None:
        settings = settings.model_copy(update={"tasks_file": file.expanduser()})
    configure_logging(settings)
    ctx.obj = settings


@contextmanager
def _command(ctx: typer.Context, name: str) -> Iterator[TaskManager]:
    """Open the task manager for one command and report failures.

    Any TodoError becomes an error line on stderr and exit code 1.
    """
    settings: TodoSettings = ctx.obj
    bind_context(command=name, tasks_file=str(settings.tasks_file))
    try:
        yield TaskManager(TaskStore(settings.tasks_file))
    except TodoError as e:
        logger.info("command_failed", error=str(e), error_type=type(e).__name__)
        err_console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        raise typer.Exit(code=1) from e
    finally:
        clear_context()


@app.command()
def add(
    ctx: typer.Context,
    description: str = typer.Argument(..., help="Description of the task."),
    due: Optional[str] = typer.Option(
        None,
        "--due",
        help=f"Due date as {DUE_FORMATS_HELP} (read as IST).",
    ),
) -> None:
    """Add a new task."""
    with _command(ctx, "add") as manager:
        index, _ = manager.add(description, due=due)
        console.print(f"Task added successfully (index {index}).", markup=False)


@app.command("list")
def list_tasks(ctx: typer.Context) -> None:
    """List all tasks."""
    with _command(ctx, "list") as manager:
        tasks = manager.list_tasks()
        if not tasks:
            console.print(EMPTY_MESSAGE, markup=False)
            return
        console.print(build_task_table(tasks))


@app.command()
def done(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="The 0-based index of the task."),
) -> None:
    """Mark a task as done by its index."""
    with _command(ctx, "done") as manager:
        if manager.mark_done(index):
            console.print(f"Task {index} marked as done.", markup=False)
        else:
            console.print(f"Task {index} is already done.", markup=False)


@app.command()
def delete(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="The 0-based index of the task."),
) -> None:
    """Delete a task by its index."""
    with _command(ctx, "delete") as manager:
        task = manager.delete(index)
        console.print(f'Task "{task.description}" deleted.', markup=False)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
