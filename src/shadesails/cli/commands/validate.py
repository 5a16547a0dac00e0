"""Validate command for checking quote configuration files.

Checks a JSON configuration file for syntax and schema errors, then runs
the measurement checks: typo suggestions, range errors, missing edges,
the maximum perimeter, anchor heights and geometric feasibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from shadesails.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)
from shadesails.domain.services.measurement_review import PENDING_SUGGESTIONS


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a shade sail configuration file.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings
        3 - Configuration has typo suggestions awaiting a decision

    Example:
        shadesails validate my-sail.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def _display_load_error(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "<root>"
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, dict):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.suggestions:
        typer.echo("Suggested corrections:")
        for suggestion in result.suggestions:
            typer.echo(
                f"  {suggestion.path}: {suggestion.message} "
                f"(entered {suggestion.value:g}mm, suggested "
                f"{suggestion.suggested_value:g}mm)"
            )
        typer.echo(f"  {PENDING_SUGGESTIONS}")
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    error_count = len(result.errors)
    warning_count = len(result.warnings)
    suggestion_count = len(result.suggestions)
    if result.errors:
        typer.echo(
            f"Validation failed: {error_count} error(s), {warning_count} warning(s)",
            err=True,
        )
    elif result.suggestions:
        typer.echo(f"Validation needs review: {suggestion_count} suggested correction(s)")
    elif result.warnings:
        typer.echo(f"Validation passed with {warning_count} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
