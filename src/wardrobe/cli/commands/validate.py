"""Validate command for checking wardrobe configuration files.

A file is valid when it loads against the schema and every value in it is
accepted when replayed onto a fresh configurator.
"""

from pathlib import Path
from typing import Annotated

import typer

from wardrobe.application.config import ConfigError, apply_configuration, load_config
from wardrobe.application.factory import ServiceFactory
from wardrobe.domain import ConfiguratorError


def _display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error.

    Args:
        error: The ConfigError to display
    """
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
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a wardrobe configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema errors (unknown keys, wrong types, bounds, unknown material)
    - Module overrides the configurator would reject (e.g. index out of range)

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors

    Example:
        wardrobe validate my-wardrobe.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    configurator = ServiceFactory(settings=config.settings).create_configurator()
    try:
        apply_configuration(configurator, config)
        counter_label = configurator.summary.counter_label
    except ConfiguratorError as e:
        typer.echo("Errors:", err=True)
        typer.echo(f"  {e.error_type}: {e}", err=True)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)
    finally:
        configurator.close()

    typer.echo(f"Validation passed. {counter_label} configured.")
