"""Structured logging configuration using structlog."""

import logging
import sys
from collections.abc import Mapping
from typing import Any

import structlog
from structlog.types import Processor

from adyen_client.config import AdyenSettings

REDACTED = "***"

# Payload keys whose values must never reach a log sink.
SENSITIVE_KEYS = frozenset({"number", "cvc", "card.encrypted.json", "password"})


def redact(payload: Any) -> Any:
    """Copy of a request/response payload with card data masked."""
    if isinstance(payload, Mapping):
        return {
            key: REDACTED if key in SENSITIVE_KEYS else redact(value)
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [redact(item) for item in payload]
    return payload


def configure_logging(log_level: str = "INFO", format_as_json: bool = False) -> None:
    """
    Configure structured logging for applications using the client.

    The library only obtains loggers through ``get_logger``; applications that
    have not configured structlog can call this once at start-up.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_as_json: If True, output logs as JSON; otherwise use console format
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    if format_as_json:
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


def configure_logging_from_settings(settings: AdyenSettings) -> None:
    """Configure logging from ``ADYEN_LOG_LEVEL`` and ``ADYEN_LOG_JSON``."""
    configure_logging(log_level=settings.log_level, format_as_json=settings.log_json)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
