"""
Centralized logging configuration using structlog
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

# Context variables for request tracking
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
operation_name_ctx: ContextVar[str | None] = ContextVar("operation_name", default=None)

# Level names accepted by configure_logging and the CLI
LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


class RequestContextFilter:
    """Add GraphQL request context to log records."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        _ = logger, method_name

        request_id = request_id_ctx.get()
        operation_name = operation_name_ctx.get()

        if request_id:
            event_dict["request_id"] = request_id

        if operation_name:
            event_dict["operation_name"] = operation_name

        return event_dict


def configure_logging(debug: bool = False, log_level: str | None = None) -> None:
    """Configure structlog with appropriate processors and formatters.

    Args:
        debug: If True, use human-readable console output. If False, use JSON.
        log_level: Explicit level name; defaults to DEBUG when ``debug`` is set,
            INFO otherwise.

    Raises:
        ValueError: If ``log_level`` is not a standard level name
    """

    # Determine log level before touching any global state
    if log_level is not None:
        level = LOG_LEVELS.get(log_level.upper())
        if level is None:
            raise ValueError(
                f"Unknown log level {log_level!r}; expected one of {', '.join(LOG_LEVELS)}"
            )
    else:
        level = logging.DEBUG if debug else logging.INFO

    # Configure stdlib logging
    logging.basicConfig(
        level=level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        # Drop events below the stdlib level
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        # request_id / operation_name
        RequestContextFilter(),
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        # %-style arguments
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        # Development: human-readable console output
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Generate a compact request id: microsecond timestamp plus 2 random bytes.

    Returns a 14-character URL-safe base64 string (10 bytes, padding stripped).
    """
    timestamp_us = int(time.time() * 1_000_000)
    combined = timestamp_us.to_bytes(8, byteorder="big") + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(combined).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None, operation_name: str | None = None) -> str:
    """Set request context variables.

    Args:
        request_id: Request id to set (generates one if None)
        operation_name: GraphQL operation name, when known

    Returns:
        The request id now bound to the context
    """
    if request_id is None:
        request_id = generate_request_id()

    request_id_ctx.set(request_id)
    if operation_name is not None:
        operation_name_ctx.set(operation_name)
    return request_id


def clear_request_context() -> None:
    """Clear request context variables."""
    request_id_ctx.set(None)
    operation_name_ctx.set(None)


def get_request_id() -> str | None:
    """Get the current request id."""
    return request_id_ctx.get()
