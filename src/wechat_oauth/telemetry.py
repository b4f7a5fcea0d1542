"""OpenTelemetry integration for the WeChat OAuth client.

Provides tracing and structured logging for observability.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

    from .config import TelemetryConfig

# Query parameters that must never reach logs or span attributes
SENSITIVE_PARAMS = frozenset({"secret", "code", "access_token", "refresh_token"})
REDACTED = "***"

# Module-level tracer and logger
_tracer: trace.Tracer | None = None
_logger: structlog.BoundLogger | None = None


def get_tracer() -> trace.Tracer:
    """Get or create the client tracer."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer("wechat-oauth", "0.1.0")
    return _tracer


def get_logger() -> structlog.BoundLogger:
    """Get or create the client logger."""
    global _logger
    if _logger is None:
        _logger = structlog.get_logger("wechat-oauth")
    return _logger


def configure_telemetry(config: TelemetryConfig) -> None:
    """Configure the client's tracer and logger.

    Only the client's own logger is replaced; the application's global
    structlog configuration is left alone. With telemetry disabled the
    tracer is a no-op and every log event is dropped.

    Args:
        config: Telemetry configuration.
    """
    global _tracer, _logger

    if not config.enabled:
        _tracer = trace.NoOpTracer()
        _logger = structlog.wrap_logger(
            structlog.PrintLogger(),
            processors=[_drop_event],
            context_class=dict,
        )
        return

    _tracer = trace.get_tracer(config.service_name, "0.1.0")
    _logger = structlog.wrap_logger(
        structlog.PrintLogger(),
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(config.log_level)
        ),
        context_class=dict,
        service=config.service_name,
    )


def _drop_event(logger: Any, method_name: str, event_dict: Any) -> Any:
    raise structlog.DropEvent


def redact_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of query parameters safe for logs and spans."""
    return {
        key: REDACTED if key in SENSITIVE_PARAMS else value
        for key, value in params.items()
    }


@contextmanager
def trace_operation(
    name: str,
    *,
    attributes: dict[str, Any] | None = None,
) -> Generator[trace.Span, None, None]:
    """Context manager for tracing an operation.

    Args:
        name: Name of the operation.
        attributes: Optional span attributes.

    Yields:
        The active span.
    """
    tracer = get_tracer()
    with tracer.start_as_current_span(name) as span:
        if attributes:
            for key, value in attributes.items():
                span.set_attribute(key, value)
        try:
            yield span
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR, str(e)))
            span.record_exception(e)
            raise
