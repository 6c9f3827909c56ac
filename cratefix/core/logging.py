"""Structured logging configuration — structlog + stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog


_DEFAULT_LEVEL = "WARNING"


def _known_level(name: str) -> str:
    """Return *name* if stdlib logging knows it, else the default level."""
    if isinstance(logging.getLevelName(name), int):
        return name
    return _DEFAULT_LEVEL


def setup_logging(verbose: bool = False) -> None:
    """Configure structlog and stdlib logging.

    Reads from environment variables:
        CRATEFIX_LOG_LEVEL  — log level (default: WARNING, DEBUG with --verbose)
        CRATEFIX_LOG_FORMAT — console | json (default: console)

    Logs go to stderr so they never interleave with the report on stdout.
    """
    requested = os.environ.get("CRATEFIX_LOG_LEVEL", _DEFAULT_LEVEL).upper()
    log_level = "DEBUG" if verbose else _known_level(requested)
    log_format = os.environ.get("CRATEFIX_LOG_FORMAT", "console").lower()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": shared_processors,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "structlog",
                },
            },
            "root": {
                "handlers": ["default"],
                "level": log_level,
            },
            "loggers": {
                "cratefix": {"level": log_level},
            },
        }
    )

    if not verbose and log_level != requested:
        # Malformed — run at the default level with a warning
        structlog.get_logger("cratefix.logging").warning(
            "logging.unknown_level", requested=requested, using=log_level
        )
