"""
Structured logging utilities.

Configures structlog for the library and provides a helper for writing an
error value as a structured log line.
"""

from __future__ import annotations

import logging
from collections.abc import Callable  # noqa: TCH003
from typing import Any

import structlog

from terror.core.config.logging_config import LoggingConfig
from terror.core.models import ErrorObj


def configure_logging(logging_config: LoggingConfig) -> None:
    """
    Apply a structlog configuration using the provided settings.

    Args:
        logging_config: Level and renderer ("console" or "json") to use.
    """
    level = getattr(logging, logging_config.level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)8s %(message)s",
    )

    renderer: Any
    if logging_config.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


def log_error(
    err: ErrorObj,
    logger_obj: Any | None = None,
    level: str = "error",
    **context: Any,
) -> None:
    """
    Write an error value as a structured log line.

    The event is the ``str(err)`` log line; status, error code, identifier
    and tags are bound as key/value metadata.

    Args:
        err: Error value to log.
        logger_obj: structlog logger to use (defaults to this module's).
        level: Logging level (debug|info|warning|error).
        **context: Arbitrary extra key/value metadata.
    """
    target = logger_obj if logger_obj is not None else structlog.get_logger(__name__)
    log_fn: Callable[..., Any] = getattr(target, level, target.error)
    log_fn(
        str(err),
        status=err.status,
        error_code=err.error_code,
        id=str(err.identifier) if err.identifier is not None else None,
        tags=list(err.tags),
        **context,
    )
