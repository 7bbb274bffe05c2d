"""Tests for configuration and logging setup."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog

from todo_cli.config import (
    TodoSettings,
    get_settings,
    reload_settings,
    set_settings,
)
from todo_cli.logging import bind_context, clear_context, configure_logging


class TestTodoSettings:
    """Tests for TodoSettings class."""

    def test_default_values(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {}, clear=True):
            settings = TodoSettings()

        assert settings.tasks_file == Path("tasks.json")
        assert settings.log_level == "warning"
        assert settings.log_format == "console"
        assert settings.app_name == "todo_cli"

    def test_env_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        env = {"TODO_TASKS_FILE": "/data/my-tasks.json", "TODO_LOG_LEVEL": "debug"}
        with patch.dict(os.environ, env, clear=True):
            settings = TodoSettings()

        assert settings.tasks_file == Path("/data/my-tasks.json")
        assert settings.log_level == "debug"

    def test_project_json_config(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config_dir = tmp_path / ".todo_cli"
        config_dir.mkdir()
        (config_dir / "settings.json").write_text(json.dumps({"tasks_file": "from-json.json"}))

        with patch.dict(os.environ, {}, clear=True):
            settings = TodoSettings()
        assert settings.tasks_file == Path("from-json.json")

        with patch.dict(os.environ, {"TODO_TASKS_FILE": "from-env.json"}, clear=True):
            settings = TodoSettings()
        assert settings.tasks_file == Path("from-env.json")

    def test_tilde_expansion(self):
        settings = TodoSettings(tasks_file="~/tasks.json")
        assert settings.tasks_file == Path.home() / "tasks.json"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            TodoSettings(log_level="verbose")


class TestSettingsSingleton:
    """Tests for get_settings / set_settings / reload_settings."""

    def test_set_and_get(self, tmp_path: Path):
        custom = TodoSettings(tasks_file=tmp_path / "custom.json")
        try:
            set_settings(custom)
            assert get_settings() is custom
        finally:
            reload_settings()

    def test_reload_creates_new_instance(self, mock_context):
        assert get_settings() is mock_context.settings
        assert reload_settings() is not mock_context.settings


class TestLogging:
    """Tests for structlog configuration."""

    def test_json_format_writes_to_stderr(self, capsys):
        configure_logging(TodoSettings(log_level="info", log_format="json"))
        bind_context(command="add")
        try:
            structlog.get_logger("test").info("task_added", index=0)
        finally:
            clear_context()

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip().splitlines()[-1])
        assert record["event"] == "task_added"
        assert record["command"] == "add"
        assert record["level"] == "info"

    def test_level_filtering(self, capsys):
        configure_logging(TodoSettings(log_level="warning", log_format="json"))
        structlog.get_logger("test").info("hidden")
        assert capsys.readouterr().err == ""

    def test_defaults_without_settings(self, capsys):
        configure_logging()
        structlog.get_logger("test").debug("hidden")
        structlog.get_logger("test").warning("shown")
        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err
