"""
Centralized logging configuration using structlog.

This module configures structured logging for the entire application,
with request context (correlation_id, request_path) merged from
contextvars bound by the HTTP middleware.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from eshop.core.config import settings


def configure_logging() -> None:
    """
    Configure structlog for the application.

    Sets up processors including:
    - TimeStamper with ISO format
    - Log level addition
    - Exception formatting
    - JSON or Console rendering based on settings

    Uses LOG_LEVEL and LOG_FORMAT from environment variables via settings.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.log_format.lower() == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def bind_request_context(**kwargs: Any) -> None:
    """
    Bind request-scoped context variables to the current context.

    Clears anything left over from a previous request first, so values
    never leak between requests served by the same worker.

    Example:
        bind_request_context(
            correlation_id="789e0123-e89b-12d3-a456-426614174999",
            request_path="/api/v1/catalog/genders",
        )

    Args:
        **kwargs: Key-value pairs to bind to logging context
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_request_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
