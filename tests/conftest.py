"""Shared test fixtures for todo-cli tests.

Provides:
- MockContext for isolating tests from global settings and TODO_* env vars
- Temporary tasks file fixtures
- Store and manager fixtures
"""

import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest
import structlog

from todo_cli.config import TodoSettings, reload_settings, set_settings
from todo_cli.tasks.manager import TaskManager
from todo_cli.tasks.store import TaskStore


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Clearing TODO_* environment variables
    - Installing settings that point at a temporary tasks file
    - Resetting the global settings singleton afterwards

    Usage:
        with MockContext() as ctx:
            settings = ctx.settings
            tasks_file = ctx.tasks_file
    """

    def __init__(self, **settings_kwargs):
        self._settings_kwargs = settings_kwargs
        self._temp_dir: tempfile.TemporaryDirectory | None = None
        self._settings: TodoSettings | None = None
        self._original_env: dict[str, str] = {}

    def __enter__(self) -> "MockContext":
        self._temp_dir = tempfile.TemporaryDirectory()

        for var in [name for name in os.environ if name.startswith("TODO_")]:
            self._original_env[var] = os.environ.pop(var)

        self._settings = TodoSettings(
            tasks_file=self.tasks_file,
            **self._settings_kwargs,
        )
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        os.environ.update(self._original_env)
        reload_settings()
        if self._temp_dir:
            self._temp_dir.cleanup()

    @property
    def settings(self) -> TodoSettings:
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings

    @property
    def workspace_dir(self) -> Path:
        if self._temp_dir is None:
            raise RuntimeError("MockContext not entered")
        return Path(self._temp_dir.name)

    @property
    def tasks_file(self) -> Path:
        return self.workspace_dir / "tasks.json"


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated settings context."""
    with MockContext() as ctx:
        yield ctx


@pytest.fixture
def tasks_file(tmp_path: Path) -> Path:
    """Path to a tasks file that does not exist yet."""
    return tmp_path / "tasks.json"


@pytest.fixture
def store(tasks_file: Path) -> TaskStore:
    return TaskStore(tasks_file)


@pytest.fixture
def manager(store: TaskStore) -> TaskManager:
    return TaskManager(store)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo structlog configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()
