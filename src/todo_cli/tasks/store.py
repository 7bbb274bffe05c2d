"""Simple file-based task store.

The whole task list lives in one JSON file: an ordered array of
``{"description", "status", "due"}`` objects. Every load reads the whole
file and every save overwrites it. There is no locking; when two
invocations race, the last writer wins.
"""

import json
from pathlib import Path
from typing import Iterable

from todo_cli.errors import StoreIOError, StoreParseError
from todo_cli.logging import Loggers
from todo_cli.tasks.models import Task

logger = Loggers.persistence()


class TaskStore:
    """Loads and saves the ordered task list.

    Example:
        >>> store = TaskStore(Path("tasks.json"))
        >>> tasks = store.load()
        >>> tasks.append(Task("Write report"))
        >>> store.save(tasks)
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> list[Task]:
        """Read every task from the file.

        A missing file is an empty list; the file is not created.

        Raises:
            StoreParseError: If the file content is not a valid task list.
            StoreIOError: If the file cannot be read.
        """
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("tasks_file_missing", path=str(self._path))
            return []
        except OSError as e:
            raise StoreIOError(self._path, e.strerror or str(e)) from e

        try:
            data = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise StoreParseError(self._path, f"invalid UTF-8 at byte {e.start}") from e
        except json.JSONDecodeError as e:
            raise StoreParseError(self._path, f"invalid JSON ({e.msg})") from e

        if not isinstance(data, list):
            raise StoreParseError(self._path, "expected a JSON array of tasks")

        tasks = []
        for position, item in enumerate(data):
            if not isinstance(item, dict):
                raise StoreParseError(
                    self._path, f"entry {position} is not an object"
                )
            try:
                tasks.append(Task.from_dict(item))
            except KeyError as e:
                raise StoreParseError(
                    self._path, f"entry {position} is missing {e.args[0]!r}"
                ) from e
            except (TypeError, ValueError) as e:
                raise StoreParseError(self._path, f"entry {position}: {e}") from e

        logger.debug("tasks_loaded", path=str(self._path), count=len(tasks))
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Overwrite the file with the full task list.

        Raises:
            StoreIOError: If the file cannot be written.
        """
        data = [task.to_dict() for task in tasks]
        content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
        # Encode before opening: a failure must not truncate the existing file.
        try:
            encoded = content.encode("utf-8")
        except UnicodeEncodeError as e:
            raise StoreIOError(self._path, "content is not encodable as UTF-8") from e
        try:
            self._path.write_bytes(encoded)
        except OSError as e:
            raise StoreIOError(self._path, e.strerror or str(e)) from e
        logger.debug("tasks_saved", path=str(self._path), count=len(data))
