"""Logging configuration for release-notes-sync."""
import logging
import sys
from typing import Any, List, Optional, TextIO

import structlog

from release_notes_sync.domain.errors import ConfigurationError

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(log_level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Configure structlog to render human-readable lines on stderr.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        stream: Destination stream (stderr by default)
    """
    level_name = log_level.upper()
    if level_name not in LEVELS:
        raise ConfigurationError(f"Unknown log level: {log_level!r}")
    numeric_level = getattr(logging, level_name)

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer(colors=False),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)
