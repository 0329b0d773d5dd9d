"""structlog setup for the scanner CLI.

Logs always go to stderr so a report on stdout can be piped or redirected.
Two renderers are offered: ``json`` for collection by a log pipeline and
``console`` for a person reading a terminal.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

LOG_FORMATS = ("json", "console")


def _renderers(fmt: str) -> list[Any]:
    if fmt == "console":
        # ConsoleRenderer formats exceptions itself.
        return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer(sort_keys=True)]


def setup_logging(level: str = "info", fmt: str = "json") -> None:
    """Configure structlog at *level* with the *fmt* renderer.

    Loggers are not cached, so calling this again (one CLI invocation after
    another in the same process) takes effect for module-level loggers too.
    """
    if fmt not in LOG_FORMATS:
        raise ValueError(f"Invalid log format: {fmt}. Must be one of {LOG_FORMATS}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            *_renderers(fmt),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a logger bound with the component that emits it."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
