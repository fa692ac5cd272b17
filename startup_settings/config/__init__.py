"""Configuration package for the loader's own runtime settings."""

from .settings import SUPPORTED_LOG_LEVELS, RuntimeSettings, config_load_runtime_settings

__all__ = ["RuntimeSettings", "SUPPORTED_LOG_LEVELS", "config_load_runtime_settings"]
