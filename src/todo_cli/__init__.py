"""todo-cli - a personal task tracker for the command line.

Tasks have a description, a status (pending or done) and an optional due
date normalized to IST (UTC+05:30). The list is stored in a local JSON
file and identified by 0-based index.

Modules:
- tasks: task record, due-date handling, JSON store and task manager
- cli: typer application exposing add, list, done and delete
- config: pydantic-settings configuration (TODO_* environment variables)
- logging: structlog configuration
"""

__version__ = "0.1.0"
