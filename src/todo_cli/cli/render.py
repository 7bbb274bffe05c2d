"""Rich rendering helpers for task output."""

from rich.table import Table
from rich.text import Text

from todo_cli.tasks.due import format_due
from todo_cli.tasks.models import Task

NO_DUE_DATE = "no due date"
EMPTY_MESSAGE = 'No tasks found. Add one using `todo add "My task"`'


def due_label(task: Task) -> str:
    """Due date in the reference timezone, or the no-due-date marker."""
    return format_due(task.due) if task.due is not None else NO_DUE_DATE


def build_task_table(tasks: list[tuple[int, Task]]) -> Table:
    """Build a table with one row per task: index, status, description, due."""
    table = Table(title="Your ToDo Tasks", show_lines=False, padding=(0, 1))
    table.add_column("#", justify="right", style="bold")
    table.add_column("", justify="center")
    table.add_column("Description")
    table.add_column("Due", no_wrap=True)

    for index, task in tasks:
        style = "" if task.is_pending else "dim"
        due = Text(due_label(task), style="dim italic" if task.due is None else "")
        # Text() keeps user descriptions from being parsed as rich markup.
        table.add_row(
            str(index),
            task.icon,
            Text(task.description, style=style),
            due,
        )
    return table
