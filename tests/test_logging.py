"""
Tests for structlog configuration and request context binding.
"""
import structlog

from eshop.core.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
)


def test_configure_logging_installs_structlog_config():
    try:
        configure_logging()
        assert structlog.is_configured()
        assert structlog.get_config()["cache_logger_on_first_use"] is True
    finally:
        structlog.reset_defaults()


def test_configure_logging_merges_bound_request_context():
    try:
        configure_logging()
        processors = structlog.get_config()["processors"]
        assert processors[0] is structlog.contextvars.merge_contextvars
        assert isinstance(processors[-1], (structlog.processors.JSONRenderer, structlog.dev.ConsoleRenderer))
    finally:
        structlog.reset_defaults()


def test_bind_request_context_replaces_previous_values():
    try:
        bind_request_context(correlation_id="first", request_path="/a")
        bind_request_context(correlation_id="second")

        assert structlog.contextvars.get_contextvars() == {"correlation_id": "second"}
    finally:
        clear_request_context()

    assert structlog.contextvars.get_contextvars() == {}
