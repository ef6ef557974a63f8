"""
Logging setup for callers embedding the ordering engine.

The engine only emits structlog events (``manifests_sorted``,
``document_skipped``, ``hook_discarded`` ...); it never configures logging
itself. Applications call :func:`configure_logging` once at startup.
"""

import logging
from typing import Any

import structlog

LOGGER_NAME = "releaseorder"


def configure_logging(level: int | str | None = None, json_output: bool = True) -> None:
    """Route structlog events through stdlib logging.

    When ``level`` is omitted the ``RELEASEORDER_LOG_LEVEL`` setting is used.
    ``json_output=False`` renders human-readable lines for local runs.
    """
    if level is None:
        from releaseorder.config import get_settings

        level = get_settings().log_level.upper()

    renderer: Any = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=level, format="%(message)s")


def bind_context(**kwargs: Any) -> structlog.stdlib.BoundLogger:
    """Return the engine logger with contextual fields bound."""
    return structlog.get_logger(LOGGER_NAME).bind(**kwargs)
