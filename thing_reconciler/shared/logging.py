"""
Logging Configuration - Shared Layer

Configures structlog on top of the standard logging module and offers a
helper to bind the UID of the Thing being reconciled to every log line.
"""

import logging
import os
import sys
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

import structlog
from structlog.types import Processor

from thing_reconciler.shared.consts import EnumEnvironment


def _enum_value(value: Any) -> Any:
    return value.value if hasattr(value, "value") else value


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Configure structlog and the root logger.

    Values that are not passed fall back to the ``LOG_LEVEL`` and
    ``LOG_FILE_PATH`` environment variables, so the library can log before
    the settings object exists.

    Args:
        level: Log level name, e.g. ``"DEBUG"``.
        format_string: Ignored. Records are rendered by structlog, so a
            stdlib format string has no effect on the output.
        file_path: Optional file to mirror console output to.
        environment: ``production`` renders JSON, anything else renders
            coloured console output.
    """
    log_level = level or os.environ.get("LOG_LEVEL") or "INFO"
    log_file = file_path or os.environ.get("LOG_FILE_PATH")

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    renderer: Processor
    if environment.lower() == EnumEnvironment.PRODUCTION:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    get_logger(__name__).debug(
        "logging.configured", level=log_level, file_path=log_file
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from an ``AppSettings``-like object.

    Args:
        settings: Object exposing ``logging.level``, ``logging.format``,
            ``logging.file_path`` and ``environment``.
    """
    configure_logging(
        level=_enum_value(settings.logging.level),
        format_string=settings.logging.format,
        file_path=settings.logging.file_path,
        environment=_enum_value(settings.environment),
    )


@contextmanager
def bound_thing_context(thing_uid: Any) -> Iterator[None]:
    """Bind ``thing_uid`` to every structlog event emitted inside the block."""
    with structlog.contextvars.bound_contextvars(thing_uid=str(thing_uid)):
        yield


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
