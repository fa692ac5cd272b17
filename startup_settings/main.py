"""Main module entrypoint for validating application settings from the command line.

This module loads a settings schema by import path, validates it against the
configured lookup chain, and reports the outcome to the operator.
"""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
from collections.abc import Sequence

from startup_settings.bootstrap import bootstrap_create_lookup
from startup_settings.config import config_load_runtime_settings
from startup_settings.domain import RuntimeConfigError, SchemaError, SettingsValidationError
from startup_settings.schema import schema_derive_fields
from startup_settings.validation import (
    validation_build_diagnostics,
    validation_build_settings,
    validation_describe_settings,
)

EXIT_VALIDATION_FAILED = 1
EXIT_SCHEMA_ERROR = 2
EXIT_RUNTIME_CONFIG_ERROR = 3


def main(argv: Sequence[str] | None = None) -> None:
    """Run selected command with validated runtime configuration.

    Args:
        argv: Optional argument list; defaults to `sys.argv[1:]`.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with a non-zero code when validation or schema loading fails.
    """

    argument_parser = argparse.ArgumentParser(description="Startup settings validation entrypoint")
    argument_parser.add_argument(
        "command",
        choices=("check",),
        help="Runtime command: `check` validates settings for a schema and reports the outcome",
        type=str,
    )
    argument_parser.add_argument(
        "schema",
        type=str,
        help="Schema import path in `package.module:SchemaClass` format",
    )
    argument_parser.add_argument(
        "--env-file",
        dest="env_file",
        type=str,
        help="Optional dotenv file override used as fallback source",
    )
    argument_parser.add_argument(
        "--prefix",
        dest="prefix",
        type=str,
        help="Optional environment variable prefix override",
    )
    argument_parser.add_argument(
        "--format",
        dest="output_format",
        choices=("text", "json"),
        default="text",
        help="Output format for the validation report",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    try:
        runtime_settings = config_load_runtime_settings()
    except RuntimeConfigError as error:
        print(str(error), file=sys.stderr)
        raise SystemExit(EXIT_RUNTIME_CONFIG_ERROR) from error

    logging.basicConfig(
        level=runtime_settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides: dict[str, str] = {}
    if parsed_arguments.env_file is not None:
        overrides["dotenv_path"] = parsed_arguments.env_file
    if parsed_arguments.prefix is not None:
        overrides["env_prefix"] = parsed_arguments.prefix
    runtime_settings = runtime_settings.model_copy(update=overrides)

    try:
        schema_type = main_import_schema(parsed_arguments.schema)
        fields = schema_derive_fields(schema_type)
    except SchemaError as error:
        print(f"SCHEMA_ERROR: {error}", file=sys.stderr)
        raise SystemExit(EXIT_SCHEMA_ERROR) from error

    lookup = bootstrap_create_lookup(runtime_settings)
    try:
        settings = validation_build_settings(fields, lookup)
    except SettingsValidationError as error:
        main_print_validation_failure(error, parsed_arguments.output_format)
        raise SystemExit(EXIT_VALIDATION_FAILED) from error

    rows = validation_describe_settings(fields, settings)
    if parsed_arguments.output_format == "json":
        print(json.dumps({"status": "ok", "schema": schema_type.__qualname__, "fields": rows}))
        return

    print(f"OK: {schema_type.__qualname__} loaded from {lookup.lookup_source_name()}")
    for row in rows:
        print(f"  {row['name']} [{row['kind']}] = {row['value']}")


def main_import_schema(schema_path: str) -> type:
    """Import a schema type from a `module:attribute` path.

    Args:
        schema_path: Import path in `package.module:SchemaClass` format.

    Returns:
        type: Imported schema type.

    Raises:
        SchemaError: Raised when the path is malformed or the module fails to import for any reason.
    """

    module_name, separator, attribute_name = schema_path.partition(":")
    if not separator or not module_name or not attribute_name:
        raise SchemaError(f"schema path must use `module:attribute` format, got {schema_path!r}")

    try:
        module = importlib.import_module(module_name)
    except Exception as error:
        raise SchemaError(f"cannot import schema module {module_name!r}: {type(error).__name__}: {error}") from error

    schema_type = getattr(module, attribute_name, None)
    if not isinstance(schema_type, type):
        raise SchemaError(f"{schema_path!r} does not name a class")
    return schema_type


def main_print_validation_failure(error: SettingsValidationError, output_format: str) -> None:
    """Print validation failure report for operators.

    Args:
        error: Missing or invalid settings error.
        output_format: `text` or `json`.

    Returns:
        None: Prints the report to stdout (json) or stderr (text) as side effect.

    Raises:
        ValueError: Raised when the error carries no field names.
    """

    diagnostics = validation_build_diagnostics(error)
    if output_format == "json":
        print(json.dumps({"status": "failed", "diagnostics": diagnostics}))
        return
    print(f"{diagnostics[0]['error_code']}: {error}", file=sys.stderr)


if __name__ == "__main__":
    main()
