"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from typing import Optional

from src.config.task_bank_config import TaskBankConfig
from src.infrastructure.observability import configure_structlog as _configure_structlog


def configure_logging(config: Optional[TaskBankConfig] = None) -> TaskBankConfig:
    """Configure structlog from config (read from the environment by default).

    Returns:
        The config that was applied.
    """
    config = config or TaskBankConfig.from_environment()
    _configure_structlog(environment=config.environment, log_level=config.log_level)
    return config


__all__ = ["configure_logging"]
