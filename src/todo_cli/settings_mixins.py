"""Settings mixins for storage location and CLI output.

StorageSettingsMixin: Where the task list lives on disk.
CLISettingsMixin: Logging verbosity and format.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator


class StorageSettingsMixin:
    """Settings for the tasks file location.

    Should be composed with BaseSettings via multiple inheritance.
    """

    tasks_file: Path = Field(
        default=Path("tasks.json"),
        title="Tasks File",
        description="JSON file holding the task list (relative to the working directory)",
    )

    @field_validator("tasks_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Expand ~ in paths."""
        return Path(v).expanduser()


class CLISettingsMixin:
    """Settings for CLI logging.

    Note: This is a mixin, not a BaseSettings subclass, to avoid
    MRO issues when composed with other settings classes.
    """

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for humans, json for tooling)",
    )
