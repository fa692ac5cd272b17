"""API router package."""

from .settings_health import api_create_settings_health_router

__all__ = ["api_create_settings_health_router"]
