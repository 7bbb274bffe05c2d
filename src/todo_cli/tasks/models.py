"""Task record and status types."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from todo_cli.tasks.due import REFERENCE_TZ, normalize_due


class TaskStatus(Enum):
    """Status values for a task.

    Values are the tags written to the tasks file.
    """

    PENDING = "Pending"
    DONE = "Done"


# Status icons for display
STATUS_ICONS = {
    TaskStatus.PENDING: "☐",
    TaskStatus.DONE: "✓",
}


@dataclass
class Task:
    """A single task entry.

    Attributes:
        description: Free-text description of the task.
        status: Current status; new tasks start as PENDING.
        due: Optional due date, always aware and in the reference timezone.
    """

    description: str
    status: TaskStatus = TaskStatus.PENDING
    due: datetime | None = None

    def __post_init__(self) -> None:
        if self.due is not None:
            self.due = normalize_due(self.due)

    @property
    def is_pending(self) -> bool:
        return self.status is TaskStatus.PENDING

    @property
    def icon(self) -> str:
        return STATUS_ICONS[self.status]

    def mark_done(self) -> bool:
        """Mark the task as done.

        Returns:
            True if the status changed, False if it was already done.
        """
        if self.status is TaskStatus.DONE:
            return False
        self.status = TaskStatus.DONE
        return True

    def to_dict(self) -> dict[str, Any]:
        """Convert task to a dictionary for serialization."""
        return {
            "description": self.description,
            "status": self.status.value,
            "due": self.due.isoformat() if self.due else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Create a task from a dictionary.

        Accepts the ``due_date`` key written by older versions of the tool
        when ``due`` is absent. Unknown keys are ignored.

        Raises:
            KeyError: If ``description`` is missing.
            ValueError: If the status tag or due timestamp is malformed.
            TypeError: If a field has the wrong JSON type.
        """
        description = data["description"]
        if not isinstance(description, str):
            raise TypeError("description must be a string")

        due_raw = data["due"] if "due" in data else data.get("due_date")
        due = None
        if due_raw is not None:
            if not isinstance(due_raw, str):
                raise TypeError("due must be a string or null")
            due = datetime.fromisoformat(due_raw)
            if due.tzinfo is None:
                due = due.replace(tzinfo=REFERENCE_TZ)

        return cls(
            description=description,
            status=TaskStatus(data.get("status", TaskStatus.PENDING.value)),
            due=due,
        )
