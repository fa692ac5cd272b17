"""Health endpoint router reporting whether application settings validate."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from startup_settings.adapters import RawLookupPort
from startup_settings.domain import SettingsValidationError
from startup_settings.schema import schema_derive_fields
from startup_settings.validation import validation_build_diagnostics, validation_build_settings


def api_create_settings_health_router(schema_type: type, lookup: RawLookupPort) -> APIRouter:
    """Create health-check router that re-validates settings on each request.

    Args:
        schema_type: Settings schema type validated by the endpoint.
        lookup: Raw settings source validated by the endpoint.

    Returns:
        APIRouter: Router exposing `/health/settings` endpoint.

    Raises:
        ValueError: Raised when lookup is invalid.
        SchemaError: Raised when the schema declaration is unsupported.
    """

    if lookup is None:
        raise ValueError("lookup must not be None")
    fields = schema_derive_fields(schema_type)

    router = APIRouter(tags=["health"])

    @router.get("/health/settings")
    def api_settings_health_status() -> JSONResponse:
        """Return settings validation state without exposing values.

        Returns:
            JSONResponse: Deterministic settings health payload.

        Raises:
            SchemaError: Raised when a field kind has no registered coercer.
        """

        try:
            validation_build_settings(fields, lookup)
            payload = {
                "status": "ok",
                "schema": schema_type.__qualname__,
                "source": lookup.lookup_source_name(),
                "fields": [{"name": field_spec.name, "kind": field_spec.kind.value} for field_spec in fields],
            }
            return JSONResponse(content=payload, status_code=status.HTTP_200_OK)
        except SettingsValidationError as error:
            payload = {
                "status": "degraded",
                "schema": schema_type.__qualname__,
                "source": lookup.lookup_source_name(),
                "diagnostics": validation_build_diagnostics(error),
            }
            return JSONResponse(content=payload, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    return router
