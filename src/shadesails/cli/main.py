"""Typer CLI for shade sail quoting."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from shadesails.application import CalculateQuoteCommand, QuoteInput
from shadesails.application.config import (
    ConfigError,
    config_to_dismissed,
    config_to_sail,
    load_config,
)
from shadesails.application.config.validator import suggestion_message
from shadesails.cli.commands import validate_command
from shadesails.domain import (
    diagonal_keys_for,
    edge_keys_for,
    validate_measurement_field,
)
from shadesails.domain.measurements import SUPPORTED_CORNERS
from shadesails.domain.services import to_canonical_mm
from shadesails.domain.value_objects import FieldClass, UnitSystem
from shadesails.infrastructure import QuoteJsonExporter, QuoteSummaryFormatter

OUTPUT_FORMATS = ("summary", "json")


def _normalize_key(key: str) -> str:
    key = key.strip()
    if key.lower().startswith("height_"):
        return key.lower()
    return key.upper()


def _parse_measurements(
    entries: list[str], param_hint: str = "--measurement"
) -> dict[str, float]:
    """Parse ``KEY=VALUE`` pairs such as ``AB=5000``."""
    measurements: dict[str, float] = {}
    for entry in entries:
        key, sep, raw = entry.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(
                f"Expected KEY=VALUE, got '{entry}'", param_hint=param_hint
            )
        try:
            measurements[_normalize_key(key)] = float(raw)
        except ValueError:
            raise typer.BadParameter(
                f"'{raw}' is not a number", param_hint=param_hint
            )
    return measurements


app = typer.Typer(
    name="shadesails",
    help="Price custom shade sails and check their measurements.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.command()
def quote(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    corners: Annotated[
        int | None,
        typer.Option("--corners", "-n", help="Number of sail corners (3-6)"),
    ] = None,
    measurement: Annotated[
        list[str] | None,
        typer.Option(
            "--measurement",
            "-m",
            help="Measurement as KEY=VALUE in display units (mm or inches), repeatable",
        ),
    ] = None,
    unit: Annotated[
        str, typer.Option("--unit", "-u", help="Unit system: metric or imperial")
    ] = "metric",
    fabric: Annotated[
        str,
        typer.Option("--fabric", help="Fabric: monotec370, extrablock330, shadetec320"),
    ] = "monotec370",
    edge: Annotated[
        str, typer.Option("--edge", "-e", help="Edge finish: webbing or cabled")
    ] = "webbing",
    option: Annotated[
        str,
        typer.Option("--option", help="Measurement option: adjust or exact"),
    ] = "adjust",
    currency: Annotated[
        str, typer.Option("--currency", help="Quote currency, e.g. NZD, USD, AUD")
    ] = "NZD",
    dismiss: Annotated[
        list[str] | None,
        typer.Option(
            "--dismiss",
            help="Keep a flagged value as entered, as KEY=VALUE (height_0, height_1... for heights)",
        ),
    ] = None,
    height: Annotated[
        list[float] | None,
        typer.Option("--height", help="Anchor point height in display units, repeatable"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: summary or json"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log calculation details")
    ] = False,
) -> None:
    """Calculate a quote from a configuration file or direct entry.

    Example:
        shadesails quote -n 4 -m AB=4000 -m BC=4000 -m CD=4000 -m DA=4000
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if output_format is not None and output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. "
            f"Available formats: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    command = CalculateQuoteCommand()

    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        result = command.execute(config_to_sail(config), config_to_dismissed(config))
        output_format = output_format or config.output.format
    elif corners is not None:
        quote_input = QuoteInput(
            corners=corners,
            measurements=_parse_measurements(measurement or []),
            unit=unit,
            fabric=fabric,
            edge_type=edge,
            measurement_option=option,
            currency=currency.upper(),
            anchor_heights=list(height or []),
            dismissed_suggestions=_parse_measurements(dismiss or [], "--dismiss"),
        )
        result = command.execute_input(quote_input)
    else:
        typer.echo("Error: Provide --config or --corners", err=True)
        raise typer.Exit(code=1)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(QuoteJsonExporter().export(result))
    else:
        typer.echo(QuoteSummaryFormatter().format(result))


@app.command(name="check-typo")
def check_typo(
    value: Annotated[
        float, typer.Argument(help="Entered value in display units (mm or inches)")
    ],
    unit: Annotated[
        str, typer.Option("--unit", "-u", help="Unit system: metric or imperial")
    ] = "metric",
    field_class: Annotated[
        str,
        typer.Option("--field", help="Field kind: edge or anchor_height"),
    ] = "edge",
) -> None:
    """Check one entered value for a likely unit typo.

    Example:
        shadesails check-typo 50
    """
    try:
        system = UnitSystem(unit)
        kind = FieldClass(field_class)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    check = validate_measurement_field(to_canonical_mm(value, system), system, kind)
    if check.has_suggestion:
        typer.echo(suggestion_message(check.suggestion, system))
    elif check.error:
        typer.echo(check.error)
    else:
        typer.echo("Looks good.")


@app.command()
def diagonals(
    corners: Annotated[int, typer.Argument(help="Number of sail corners (3-6)")],
) -> None:
    """List the edges and diagonals to measure for a sail."""
    if corners not in SUPPORTED_CORNERS:
        typer.echo(
            f"Error: Corners must be one of {list(SUPPORTED_CORNERS)}, got {corners}",
            err=True,
        )
        raise typer.Exit(code=1)

    typer.echo(f"Edges:     {', '.join(edge_keys_for(corners))}")
    diagonal_keys = diagonal_keys_for(corners)
    typer.echo(f"Diagonals: {', '.join(diagonal_keys) if diagonal_keys else 'none'}")


if __name__ == "__main__":
    app()
