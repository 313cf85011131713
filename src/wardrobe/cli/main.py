"""Typer CLI for the wardrobe configurator."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from wardrobe.application.config import (
    ConfigError,
    ConfiguratorSettings,
    apply_configuration,
    load_config,
)
from wardrobe.application.factory import ServiceFactory
from wardrobe.cli.commands import validate_command
from wardrobe.cli.commands.output_handlers import (
    OUTPUT_FORMATS,
    export_stl,
    parse_override,
    print_configuration,
)
from wardrobe.domain import ConfiguratorError
from wardrobe.logging_config import setup_logging

app = typer.Typer(
    name="wardrobe",
    help="Configure a row of wardrobe modules from overall dimensions.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log layout and reconciliation details"),
    ] = False,
    log_file: Annotated[
        Optional[Path],
        typer.Option("--log-file", help="Also write log output to this file"),
    ] = None,
) -> None:
    """Configure a row of wardrobe modules from overall dimensions."""
    if verbose or log_file is not None:
        setup_logging(
            level=logging.DEBUG if verbose else logging.INFO,
            log_file=str(log_file) if log_file is not None else None,
        )


def _check_format(output_format: str, output: Path | None) -> str:
    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)
    if output_format == "stl" and output is None:
        typer.echo("Error: --output is required for stl format", err=True)
        raise typer.Exit(code=1)
    return output_format


def _emit(factory: ServiceFactory, configurator, output_format: str, output: Path | None) -> None:
    if output_format == "stl":
        export_stl(configurator, output)
    else:
        print_configuration(configurator, output_format, factory)


@app.command()
def show(
    width: Annotated[
        Optional[float], typer.Option("--width", "-w", help="Total width in cm")
    ] = None,
    height: Annotated[
        Optional[float], typer.Option("--height", "-h", help="Module height in cm")
    ] = None,
    depth: Annotated[
        Optional[float], typer.Option("--depth", "-d", help="Module depth in cm")
    ] = None,
    material: Annotated[
        Optional[str], typer.Option("--material", "-m", help="Material name")
    ] = None,
    override: Annotated[
        Optional[list[str]],
        typer.Option(
            "--override",
            "-o",
            help="Per-module override INDEX:FIELD=VALUE (0-based index, field height or depth)",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: all, summary, modules, diagram, json, stl"),
    ] = "all",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", help="Output file path (required for stl format)"),
    ] = None,
) -> None:
    """Build a configuration from options and display it."""
    output_format = _check_format(output_format, output)
    overrides = [parse_override(raw) for raw in override or []]

    factory = ServiceFactory(surface_kind="stl" if output_format == "stl" else "memory")
    configurator = factory.create_configurator()
    try:
        if width is not None:
            factory.settings.check_width(width)
            configurator.set_global_width(width)
        if height is not None:
            configurator.set_global_height(height)
        if depth is not None:
            configurator.set_global_depth(depth)
        if material is not None:
            configurator.set_material(material)
        for index, field, value in overrides:
            configurator.set_module_override(index, field, value)
    except ConfiguratorError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _emit(factory, configurator, output_format, output)


@app.command()
def apply(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: all, summary, modules, diagram, json, stl"),
    ] = "all",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", help="Output file path (required for stl format)"),
    ] = None,
) -> None:
    """Load a configuration file and display the resulting wardrobe."""
    output_format = _check_format(output_format, output)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1)

    factory = ServiceFactory(
        settings=config.settings,
        surface_kind="stl" if output_format == "stl" else "memory",
    )
    configurator = factory.create_configurator()
    try:
        apply_configuration(configurator, config)
    except ConfiguratorError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _emit(factory, configurator, output_format, output)


@app.command()
def materials() -> None:
    """List the available materials and their finishes."""
    settings = ConfiguratorSettings()
    typer.echo(f"{'Material':<10} {'Color':<9} {'Metalness':>9} {'Roughness':>9}")
    typer.echo("-" * 40)
    for finish in ServiceFactory(settings=settings).get_finishes().values():
        default = " (default)" if finish.name == settings.default_material else ""
        typer.echo(
            f"{finish.name:<10} {finish.hex_color:<9} "
            f"{finish.metalness:>9.1f} {finish.roughness:>9.1f}{default}"
        )


if __name__ == "__main__":
    app()
