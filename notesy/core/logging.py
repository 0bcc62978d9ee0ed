"""
Logging Setup.

structlog rendering on top of the stdlib ``logging`` tree. The settings
come from config/settings/logging.yaml (validated as LoggingSchema); the
CLI may override the level and the console format.

JSON records carry timestamp, level, logger, event, func_name, lineno and
whatever the caller passed in ``extra``. Give a ``source`` (see
VALID_SOURCES) when the origin matters for filtering logs/notesy.jsonl.

Usage:
    from notesy.core.logging import get_logger, setup_logging

    setup_logging()                        # once, at CLI start
    logger = get_logger(__name__)
    logger.info("Note stored", extra={"note_id": note_id})
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import Processor

from notesy.core.config import find_project_root, get_app_config
from notesy.core.config_schema import FileHandlerSchema, LoggingSchema

VALID_SOURCES = frozenset({
    "cli",
    "shell",
    "store",
    "events",
    "internal",
    "unknown",
})

# Chatty third-party loggers kept at WARNING whatever the root level is.
_QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite")


def _load_logging_config() -> LoggingSchema:
    return get_app_config().logging


def _resolve_log_path(configured_path: str) -> Path:
    """Resolve the log file path relative to project root."""
    return find_project_root() / configured_path


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]


def _file_handler(settings: FileHandlerSchema, formatter: logging.Formatter) -> logging.Handler:
    log_path = _resolve_log_path(settings.path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=settings.max_bytes,
        backupCount=settings.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: str | None = None, format_type: str | None = None) -> None:
    """
    Configure structlog and the root logger.

    Args:
        level: Overrides the YAML level (DEBUG, INFO, WARNING, ...)
        format_type: Overrides the console format, "json" or "console"

    Raises:
        AttributeError: If the level name is not a logging level
    """
    config = _load_logging_config()
    processors = _shared_processors()

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    json_formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        foreign_pre_chain=processors,
    )
    if (format_type or config.format) == "console":
        console_formatter = structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=True),
            foreign_pre_chain=processors,
        )
    else:
        console_formatter = json_formatter

    root = logging.getLogger()
    root.setLevel(getattr(logging, (level or config.level).upper()))
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    if config.handlers.console.enabled:
        # stderr, so command output on stdout stays clean
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(console_formatter)
        root.addHandler(console_handler)

    if config.handlers.file.enabled:
        root.addHandler(_file_handler(config.handlers.file, json_formatter))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Return a structlog logger; pass ``__name__``."""
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log ``message`` at ``level`` tagged with an explicit ``source``.

    Raises:
        AttributeError: If level is not a valid log level

    Example:
        log_with_source(logger, "shell", "info", "Note restored", note_id="abc")
    """
    getattr(logger, level.lower())(message, source=source, **kwargs)
