"""Error types raised by the task manager, store and date parsing.

Every error derives from TodoError so the command line can catch them in
one place and turn them into a message plus a non-zero exit code.
"""

from pathlib import Path


class TodoError(Exception):
    """Base class for all todo-cli errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class TaskValidationError(TodoError, ValueError):
    """Raised when a task description or argument is invalid."""

    pass


class DateParseError(TodoError, ValueError):
    """Raised when a due-date string matches none of the accepted formats."""

    def __init__(self, raw: str, expected: str) -> None:
        super().__init__(f"Invalid date format: {raw!r}. Expected {expected}.")
        self.raw = raw


class TaskIndexError(TodoError, IndexError):
    """Raised when a task index is outside the current list."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(
            f"Invalid task index: {index}. Use `list` to see available tasks."
        )
        self.index = index
        self.count = count


class StoreParseError(TodoError):
    """Raised when the tasks file exists but its content is malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not parse tasks file {path}: {reason}")
        self.path = path


class StoreIOError(TodoError, OSError):
    """Raised when the tasks file cannot be read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not access tasks file {path}: {reason}")
        self.path = path
