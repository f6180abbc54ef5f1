"""Typer CLI for cabinet layout planning."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from cabinet_layout.application.config import (
    ConfigError,
    LayoutConfiguration,
    load_config,
    merge_config_with_cli,
)
from cabinet_layout.application.factory import get_factory
from cabinet_layout.cli.commands import display_load_error, validate_command
from cabinet_layout.domain import LayoutContractError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="cabinet-layout",
    help="Plan bays, dividers, doors and shelves for parametric cabinets.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _load_or_default(config_file: Path | None) -> LayoutConfiguration:
    if config_file is None:
        return LayoutConfiguration(schema_version="1.0")
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def parse_bay_path(value: str) -> tuple[int, ...]:
    """Parse a dotted, 0-based bay path such as ``"1"`` or ``"0.2"``."""
    try:
        path = tuple(int(part) for part in value.split("."))
    except ValueError:
        raise typer.BadParameter(f"Bay path must be dotted integers, got '{value}'")
    if any(index < 0 for index in path):
        raise typer.BadParameter(f"Bay path indices must not be negative, got '{value}'")
    return path


@app.command()
def generate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON layout file"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Cabinet width in mm"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Cabinet height in mm"),
    ] = None,
    depth: Annotated[
        float | None,
        typer.Option("--depth", "-d", help="Cabinet depth in mm"),
    ] = None,
    thickness: Annotated[
        float | None,
        typer.Option("--thickness", "-t", help="Panel thickness in mm"),
    ] = None,
    shelves: Annotated[
        int | None,
        typer.Option("--shelves", help="Default shelves per bay"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file instead of stdout"),
    ] = None,
) -> None:
    """Generate a cabinet layout from a layout file and/or CLI options.

    CLI options override values from the file.
    """
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format '{output_format}'. Use text or json.", err=True)
        raise typer.Exit(code=1)

    config = _load_or_default(config_file)
    try:
        config = merge_config_with_cli(
            config,
            width=width,
            height=height,
            depth=depth,
            panel_thickness=thickness,
            shelves=shelves,
        )
    except ValidationError as e:
        typer.echo("Error: invalid command line override", err=True)
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"]) or "cabinet"
            typer.echo(f"  cabinet.{location}: {err['msg']}", err=True)
        raise typer.Exit(code=1)

    factory = get_factory()
    result = factory.create_generate_command().execute(config)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        rendered = factory.get_json_exporter().export(result)
    else:
        rendered = factory.get_layout_report_formatter().format(result)

    if output_file is not None:
        output_file.write_text(rendered + "\n", encoding="utf-8")
        logger.debug(f"Wrote {output_format} layout to {output_file}")
        typer.echo(f"Layout written to {output_file}")
    else:
        typer.echo(rendered)


@app.command(name="double-door")
def double_door(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to JSON layout file"),
    ],
    bay: Annotated[
        str,
        typer.Option("--bay", "-b", help="Dotted 0-based bay path, e.g. 1 or 0.2"),
    ] = "0",
) -> None:
    """Check whether a bay is wide enough for a pair of doors.

    Exits 0 when double doors fit and 1 when they do not.
    """
    path = parse_bay_path(bay)
    config = _load_or_default(config_file)

    try:
        validity = get_factory().create_generate_command().check_double_door(config, path)
    except LayoutContractError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Bay {bay}: double doors {'allowed' if validity.allowed else 'not allowed'}")
    if validity.leaf_width_mm is not None:
        typer.echo(f"  Leaf width: {validity.leaf_width_mm:.1f} mm")
    typer.echo(f"  Minimum leaf width: {validity.min_leaf_width_mm:.1f} mm")
    if validity.reason:
        typer.echo(f"  Reason: {validity.reason}")
    if not validity.allowed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
