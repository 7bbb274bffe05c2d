"""Configuration for todo-cli.

Settings Loading Priority (highest to lowest):
    1. Constructor arguments
    2. Environment variables (TODO_* prefix)
    3. Project config (./.todo_cli/settings.json)
    4. User config (~/.todo_cli/settings.json)
    5. .env file
    6. Default values
"""

from pathlib import Path
from typing import Tuple, Type

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from todo_cli.settings_mixins import CLISettingsMixin, StorageSettingsMixin

__all__ = [
    "TodoSettings",
    "get_settings",
    "set_settings",
    "reload_settings",
]

APP_NAME = "todo_cli"


def _get_json_config_source(
    settings_cls: Type[BaseSettings],
    json_file: Path,
) -> PydanticBaseSettingsSource | None:
    """Create a JSON config source if the file exists."""
    if not json_file.exists():
        return None
    return JsonConfigSettingsSource(settings_cls, json_file=json_file)


class TodoSettings(StorageSettingsMixin, CLISettingsMixin, BaseSettings):
    """Settings for the todo command line tool.

    Mixins provide organized settings:
    - StorageSettingsMixin: Tasks file location
    - CLISettingsMixin: Logging settings
    """

    model_config = SettingsConfigDict(
        env_prefix="TODO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(
        default=APP_NAME,
        title="App Name",
        description="Application name, also used for config directories",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Layer JSON config files between the environment and .env.

        Note: JSON sources are only included if the files exist.
        """
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
        ]

        project_json = _get_json_config_source(
            settings_cls,
            Path.cwd() / f".{APP_NAME}" / "settings.json",
        )
        if project_json:
            sources.append(project_json)

        user_json = _get_json_config_source(
            settings_cls,
            Path.home() / f".{APP_NAME}" / "settings.json",
        )
        if user_json:
            sources.append(user_json)

        sources.append(dotenv_settings)
        return tuple(sources)


_settings_instance: TodoSettings | None = None


def get_settings() -> TodoSettings:
    """Get the global settings instance, creating it on first access."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = TodoSettings()
    return _settings_instance


def set_settings(settings: TodoSettings) -> None:
    """Set the global settings instance."""
    global _settings_instance
    _settings_instance = settings


def reload_settings() -> TodoSettings:
    """Drop the cached instance and read settings again."""
    global _settings_instance
    _settings_instance = None
    return get_settings()
