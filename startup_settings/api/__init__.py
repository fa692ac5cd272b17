"""API package for HTTP settings diagnostics surfaces."""

from .application import create_api_application

__all__ = ["create_api_application"]
