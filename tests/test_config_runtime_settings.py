"""Regression tests for runtime settings loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from startup_settings.config import RuntimeSettings, config_load_runtime_settings
from startup_settings.domain import RuntimeConfigError


def test_config_runtime_settings_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Load defaults when no runtime variables are configured.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate default values.

    Raises:
        AssertionError: Raised when defaults are incorrect.
    """

    monkeypatch.chdir(tmp_path)
    for name in ("ENV_PREFIX", "DOTENV_PATH", "CASE_SENSITIVE", "LOG_LEVEL"):
        monkeypatch.delenv(f"STARTUP_SETTINGS_{name}", raising=False)

    runtime_settings = config_load_runtime_settings()

    assert runtime_settings == RuntimeSettings(env_prefix="", dotenv_path=".env", case_sensitive=False, log_level="INFO")


def test_config_runtime_settings_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Read prefixed variables and normalize the log level.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate environment loading.

    Raises:
        AssertionError: Raised when variables are not applied.
    """

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STARTUP_SETTINGS_ENV_PREFIX", "MYAPP_")
    monkeypatch.setenv("STARTUP_SETTINGS_CASE_SENSITIVE", "true")
    monkeypatch.setenv("STARTUP_SETTINGS_LOG_LEVEL", "debug")

    runtime_settings = config_load_runtime_settings()

    assert runtime_settings.env_prefix == "MYAPP_"
    assert runtime_settings.case_sensitive is True
    assert runtime_settings.log_level == "DEBUG"


def test_config_runtime_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Raise RuntimeConfigError for invalid runtime values.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate error wrapping.

    Raises:
        AssertionError: Raised when invalid values are accepted.
    """

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STARTUP_SETTINGS_LOG_LEVEL", "verbose")

    with pytest.raises(RuntimeConfigError, match="Runtime configuration validation failed"):
        config_load_runtime_settings()
