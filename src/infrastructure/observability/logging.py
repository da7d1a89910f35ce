"""Structured logging configuration with structlog.

This module provides centralized structlog configuration for the application,
supporting both production (JSON) and development (console) output modes.

Log Entry Format (production):
    {
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "level": "warning",
        "event": "difficulty_update_rejected",
        "task_id": "...",
        "correlation_id": "uuid",
        ...additional context
    }

Usage:
    from src.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
"""

import logging
import os
from typing import Optional, cast

import structlog
from structlog.typing import Processor

from src.application.observability.correlation import correlation_id_processor

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level(level_name: Optional[str] = None) -> int:
    """Resolve a log level name, falling back to the LOG_LEVEL environment variable.

    Args:
        level_name: Explicit level name, e.g. "DEBUG". Optional.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    name = (level_name or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    return getattr(logging, name, logging.INFO)


def configure_structlog(
    environment: str = "production", log_level: Optional[str] = None
) -> None:
    """Configure structlog for the application.

    Should be called once at application startup.

    Args:
        environment: 'production' for JSON output, anything else for console.
        log_level: Level name; defaults to the LOG_LEVEL environment variable.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=environment == "development")

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
