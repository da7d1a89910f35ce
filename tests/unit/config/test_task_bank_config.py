"""Unit tests for TaskBankConfig."""

from __future__ import annotations

import logging

import pytest

from src.config import DEFAULT_TASK_BANK_CONFIG, TEST_TASK_BANK_CONFIG, TaskBankConfig


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove config environment variables."""
    monkeypatch.delenv("TASK_BANK_ENVIRONMENT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return monkeypatch


class TestTaskBankConfigDefaults:
    """Tests for defaults and presets."""

    def test_defaults(self) -> None:
        """Default config is production at INFO."""
        config = TaskBankConfig()

        assert config.environment == "production"
        assert config.log_level == "INFO"
        assert config.log_level_number == logging.INFO
        assert DEFAULT_TASK_BANK_CONFIG == config

    def test_test_preset(self) -> None:
        """Test preset logs verbosely to the console."""
        assert TEST_TASK_BANK_CONFIG.environment == "test"
        assert TEST_TASK_BANK_CONFIG.log_level_number == logging.DEBUG

    def test_is_frozen(self) -> None:
        """Config is immutable."""
        with pytest.raises(AttributeError):
            DEFAULT_TASK_BANK_CONFIG.environment = "test"  # type: ignore[misc]


class TestTaskBankConfigValidation:
    """Tests for value validation."""

    def test_unknown_environment_raises(self) -> None:
        """Environment must be a known name."""
        with pytest.raises(ValueError, match="environment"):
            TaskBankConfig(environment="staging")

    def test_unknown_log_level_raises(self) -> None:
        """Log level must be a logging level name."""
        with pytest.raises(ValueError, match="log_level"):
            TaskBankConfig(log_level="LOUD")

    def test_lowercase_log_level_accepted(self) -> None:
        """Level names are case-insensitive."""
        assert TaskBankConfig(log_level="debug").log_level_number == logging.DEBUG


class TestTaskBankConfigFromEnvironment:
    """Tests for from_environment()."""

    def test_defaults_without_env(self, clean_env: pytest.MonkeyPatch) -> None:
        """Missing variables fall back to defaults."""
        assert TaskBankConfig.from_environment() == TaskBankConfig()

    def test_reads_env(self, clean_env: pytest.MonkeyPatch) -> None:
        """Variables are read and normalized."""
        clean_env.setenv("TASK_BANK_ENVIRONMENT", " Development ")
        clean_env.setenv("LOG_LEVEL", "warning")

        config = TaskBankConfig.from_environment()

        assert config.environment == "development"
        assert config.log_level == "WARNING"

    def test_blank_env_uses_default(self, clean_env: pytest.MonkeyPatch) -> None:
        """Blank values count as unset."""
        clean_env.setenv("TASK_BANK_ENVIRONMENT", "  ")

        assert TaskBankConfig.from_environment().environment == "production"

    def test_invalid_env_raises(self, clean_env: pytest.MonkeyPatch) -> None:
        """Invalid values fail fast."""
        clean_env.setenv("TASK_BANK_ENVIRONMENT", "qa")

        with pytest.raises(ValueError):
            TaskBankConfig.from_environment()
