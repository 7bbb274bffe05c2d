"""Command line interface for todo-cli."""

from todo_cli.cli.app import main

__all__ = ["main"]
