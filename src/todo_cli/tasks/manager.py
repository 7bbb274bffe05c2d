"""In-memory task list with add, list, done and delete operations."""

from dataclasses import replace

from todo_cli.errors import TaskIndexError, TaskValidationError
from todo_cli.logging import Loggers
from todo_cli.tasks.due import parse_due
from todo_cli.tasks.models import Task
from todo_cli.tasks.store import TaskStore

logger = Loggers.tasks()


class TaskManager:
    """Owns the ordered task list for one command invocation.

    The list is loaded from the store on construction and written back
    after every mutating operation. A task's index is its position in the
    list, so deleting a task shifts every later task down by one.

    Example:
        >>> manager = TaskManager(TaskStore(Path("tasks.json")))
        >>> index, task = manager.add("Pay rent", due="2025-06-01")
        >>> manager.mark_done(index)
        True
        >>> manager.delete(index).description
        'Pay rent'
    """

    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self._tasks: list[Task] = store.load()

    def __len__(self) -> int:
        return len(self._tasks)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    def _commit(self, tasks: list[Task]) -> None:
        # The in-memory list only changes once the store accepted the new one.
        self._store.save(tasks)
        self._tasks = tasks

    def add(self, description: str, due: str | None = None) -> tuple[int, Task]:
        """Append a new pending task and persist the list.

        Args:
            description: Task description; must not be blank.
            due: Optional raw due date ("YYYY-MM-DD" or "YYYY-MM-DD HH:MM").

        Returns:
            The new task's index and the task itself.

        Raises:
            TaskValidationError: If the description is empty or not UTF-8 encodable.
            DateParseError: If the due date cannot be parsed.
            StoreIOError: If the list cannot be saved.
        """
        if not description or not description.strip():
            raise TaskValidationError("Task description must not be empty.")
        try:
            description.encode("utf-8")
        except UnicodeEncodeError as e:
            raise TaskValidationError("Task description is not valid UTF-8 text.") from e

        due_at = parse_due(due) if due is not None else None
        task = Task(description=description, due=due_at)
        self._commit([*self._tasks, task])

        index = len(self._tasks) - 1
        logger.info("task_added", index=index, has_due=due_at is not None)
        return index, task

    def list_tasks(self) -> list[tuple[int, Task]]:
        """Return every task paired with its index, in list order."""
        return list(enumerate(self._tasks))

    def get(self, index: int) -> Task:
        """Get a task by index.

        Raises:
            TaskIndexError: If the index is out of range.
        """
        self._check_index(index)
        return self._tasks[index]

    def mark_done(self, index: int) -> bool:
        """Mark the task at ``index`` as done and persist the list.

        Marking an already-done task is not an error.

        Returns:
            True if the status changed, False if it was already done.

        Raises:
            TaskIndexError: If the index is out of range.
        """
        self._check_index(index)
        updated = replace(self._tasks[index])
        changed = updated.mark_done()
        tasks = list(self._tasks)
        tasks[index] = updated
        self._commit(tasks)
        logger.info("task_marked_done", index=index, changed=changed)
        return changed

    def delete(self, index: int) -> Task:
        """Remove the task at ``index`` and persist the list.

        Returns:
            The removed task.

        Raises:
            TaskIndexError: If the index is out of range.
        """
        self._check_index(index)
        task = self._tasks[index]
        self._commit(self._tasks[:index] + self._tasks[index + 1 :])
        logger.info("task_deleted", index=index, remaining=len(self._tasks))
        return task
