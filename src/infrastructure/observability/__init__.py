"""Observability infrastructure for structured logging.

This module provides cross-cutting observability concerns:
- Structured JSON logging with structlog
- Correlation ID injection into every log entry

Usage:
    from src.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")
"""

from src.infrastructure.observability.logging import configure_structlog

__all__: list[str] = ["configure_structlog"]
