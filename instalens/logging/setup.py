"""Structlog setup and per-lookup log context."""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

import structlog

from instalens.config import AggregatorConfig, LogFormat


def _renderers(log_format: LogFormat) -> list:
    """Final processors for the chosen output format."""
    if log_format == LogFormat.JSON:
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [
        structlog.dev.set_exc_info,
        structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
    ]


def configure_logging(config: AggregatorConfig | None = None) -> None:
    """
    Route structlog events to stdout at the configured level.

    Events carry any context bound with lookup_context, an ISO timestamp
    and the level name. Uses AggregatorConfig defaults if config is None.
    """
    config = config or AggregatorConfig()
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    # Third-party libraries (httpx, uvicorn) log through the stdlib
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            *_renderers(config.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Return a structlog logger, bound to logger_name when given."""
    logger = structlog.get_logger()
    return logger.bind(logger_name=name) if name else logger


@contextmanager
def lookup_context(username: str, **extra) -> Iterator[None]:
    """
    Attach the username (and any extra fields) to every event logged
    while a lookup runs, including events from providers and the summarizer.
    """
    with structlog.contextvars.bound_contextvars(username=username, **extra):
        yield
