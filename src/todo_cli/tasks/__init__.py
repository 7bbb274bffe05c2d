"""Task tracking core.

Provides the task record, due-date normalization, the JSON file store
and the manager that ties them together.

Example:
    >>> manager = TaskManager(TaskStore(Path("tasks.json")))
    >>> manager.add("Water the plants", due="2025-06-05")
    >>> manager.list_tasks()
"""

from todo_cli.tasks.due import REFERENCE_TZ, format_due, normalize_due, parse_due
from todo_cli.tasks.manager import TaskManager
from todo_cli.tasks.models import STATUS_ICONS, Task, TaskStatus
from todo_cli.tasks.store import TaskStore

__all__ = [
    "REFERENCE_TZ",
    "STATUS_ICONS",
    "Task",
    "TaskManager",
    "TaskStatus",
    "TaskStore",
    "format_due",
    "normalize_due",
    "parse_due",
]
