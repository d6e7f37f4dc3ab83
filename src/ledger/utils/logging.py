"""Logging configuration for the ledger service.

Stdlib logging carries the records and structlog adds structure on top.
Development gets a colored console; production and staging get one JSON
object per line. ``LOG_FORMAT`` (``console`` or ``json``) overrides that
choice, ``LOG_LEVEL`` overrides the level, and ``LOG_FILE`` adds a rotating
file handler next to stdout.
"""

import logging
import logging.handlers
import os
import sys
from typing import Any

import structlog

DEFAULT_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

# Event keys that hold 32-byte identities
IDENTITY_KEYS = ("caller", "buyer", "owner")


def get_environment() -> str:
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", DEFAULT_LEVELS.get(get_environment(), "INFO")).upper()


def get_log_format() -> str:
    default = "json" if get_environment() in ("production", "staging") else "console"
    return os.getenv("LOG_FORMAT", default).lower()


def setup_stdlib_logging() -> None:
    log_level = get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    log_file = os.getenv("LOG_FILE")
    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)

    logging.getLogger("protean").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def shorten_identities(logger, method_name, event_dict):  # noqa: ARG001
    """Console processor: show identities as ``a1b2c3d4…`` instead of 64 hex characters."""
    for key in IDENTITY_KEYS:
        value = event_dict.get(key)
        if isinstance(value, str) and len(value) == 64:
            event_dict[key] = f"{value[:8]}…"
    return event_dict


def build_processors(log_format: str) -> list:
    """Shared processor chain followed by the renderer for ``log_format``."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(shorten_identities)
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=2),
            )
        )
    return processors


def setup_structlog() -> None:
    structlog.configure(
        processors=build_processors(get_log_format()),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging() -> None:
    """Configure all logging for the application."""
    setup_stdlib_logging()
    setup_structlog()


def add_context(**kwargs: Any) -> None:
    """Bind request-scoped values that appear in every subsequent log line."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
