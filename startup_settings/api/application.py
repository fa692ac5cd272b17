"""FastAPI application factory exposing settings diagnostics."""

from fastapi import FastAPI

from startup_settings.adapters import RawLookupPort

from .routers import api_create_settings_health_router


def create_api_application(schema_type: type, lookup: RawLookupPort) -> FastAPI:
    """Create the FastAPI application instance for settings diagnostics.

    Args:
        schema_type: Settings schema type reported by health endpoints.
        lookup: Raw settings source reported by health endpoints.

    Returns:
        FastAPI: Framework application instance with settings health routes.

    Raises:
        SchemaError: Raised when the schema declaration is unsupported.
    """

    application = FastAPI(title="Startup Settings")
    application.include_router(api_create_settings_health_router(schema_type=schema_type, lookup=lookup))
    return application
