"""structlog setup for todo-cli.

Log lines go to stderr so stdout carries only command output. At the
default ``warning`` level a normal run logs nothing.
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import FilteringBoundLogger, Processor

if TYPE_CHECKING:
    from todo_cli.config import TodoSettings


def configure_logging(settings: "TodoSettings | None" = None) -> None:
    """Configure structlog from settings (defaults to console at warning)."""
    log_level = logging.WARNING
    log_format = "console"
    if settings is not None:
        log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
        log_format = settings.log_format

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    # Not cached: each CLI invocation may point stderr somewhere new.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def bind_context(**kwargs: object) -> None:
    """Attach key/values (e.g. the command name) to every later log line."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


class Loggers:
    """Logger instances for todo-cli components."""

    @staticmethod
    def cli() -> FilteringBoundLogger:
        return structlog.get_logger("todo_cli.cli")

    @staticmethod
    def tasks() -> FilteringBoundLogger:
        return structlog.get_logger("todo_cli.tasks")

    @staticmethod
    def persistence() -> FilteringBoundLogger:
        return structlog.get_logger("todo_cli.persistence")
