"""Structured logging configuration using structlog."""

import logging
import sys
from functools import lru_cache
from typing import Any

import structlog
from structlog.types import Processor

from task_manager.config import Settings, get_settings


def sanitize_for_logging(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Redact sensitive information from log events."""
    sensitive_keys = {"password", "passwd", "token", "secret", "authorization", "api_key"}

    def redact_value(key: str, value: Any) -> Any:
        key_lower = key.lower()
        if any(sensitive in key_lower for sensitive in sensitive_keys):
            return "***REDACTED***"
        if isinstance(value, dict):
            return {k: redact_value(k, v) for k, v in value.items()}
        return value

    return {k: redact_value(k, v) for k, v in event_dict.items()}


def setup_logging(settings: Settings | None = None, log_level: str | None = None) -> None:
    """Configure structured logging.

    Logs always go to stderr so that stdout carries only command output.

    Args:
        settings: Settings to use (cached settings if None)
        log_level: Level override, e.g. from the command line
    """
    settings = settings or get_settings()
    level = log_level or settings.log_level

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        sanitize_for_logging,
    ]

    if settings.log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level))


@lru_cache(maxsize=128)
def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a cached structured logger by name.

    Args:
        name: Logger name, typically __name__

    Returns:
        Bound structured logger
    """
    return structlog.get_logger(name)
