"""Configuration module for Task Bank.

Available Configurations:
- TaskBankConfig: Environment and logging settings
"""

from src.config.task_bank_config import (
    DEFAULT_TASK_BANK_CONFIG,
    TEST_TASK_BANK_CONFIG,
    TaskBankConfig,
)

__all__ = [
    "TaskBankConfig",
    "DEFAULT_TASK_BANK_CONFIG",
    "TEST_TASK_BANK_CONFIG",
]
