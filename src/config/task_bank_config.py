"""Task Bank configuration.

This module defines runtime configuration with environment variable
overrides.

Environment Variables:
- TASK_BANK_ENVIRONMENT: "production", "development" or "test" (default: production)
- LOG_LEVEL: Log level name (default: INFO)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

VALID_ENVIRONMENTS: frozenset[str] = frozenset({"production", "development", "test"})
VALID_LOG_LEVELS: frozenset[str] = frozenset(
    {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
)


def _get_str_env(key: str, default: str) -> str:
    """Get string environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or blank.

    Returns:
        Stripped value or default.
    """
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class TaskBankConfig:
    """Runtime configuration for Task Bank.

    Attributes:
        environment: Deployment environment. Selects JSON log output in
            production and console output otherwise.
        log_level: Minimum log level name.
    """

    environment: str = "production"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )

    @property
    def log_level_number(self) -> int:
        """The log level as a logging module integer."""
        return getattr(logging, self.log_level.upper())

    @classmethod
    def from_environment(cls) -> TaskBankConfig:
        """Create config from environment variables with defaults.

        Returns:
            TaskBankConfig with values from environment or defaults.
        """
        return cls(
            environment=_get_str_env("TASK_BANK_ENVIRONMENT", "production").lower(),
            log_level=_get_str_env("LOG_LEVEL", "INFO").upper(),
        )


# Default production config
DEFAULT_TASK_BANK_CONFIG = TaskBankConfig()

# Testing config with verbose console logging
TEST_TASK_BANK_CONFIG = TaskBankConfig(environment="test", log_level="DEBUG")
