"""Structured logging for the storage layer and CLI."""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.typing import FilteringBoundLogger, Processor

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a structlog logger; ``name`` is usually the module's ``__name__``."""
    return structlog.get_logger(name)


def _renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Route structlog events to stderr.

    Output goes to stderr so listings printed by the CLI stay clean on stdout.

    Args:
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL
        log_format: 'json' or 'console'

    Raises:
        ValueError: If log_level is not a valid logging level
    """
    level_name = log_level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Invalid log_level '{log_level}'. Must be one of: {', '.join(LOG_LEVELS)}")
    level = getattr(logging, level_name)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _renderer(log_format),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()
