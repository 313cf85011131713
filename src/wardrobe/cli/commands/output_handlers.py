"""Output format handling for the wardrobe CLI."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

if TYPE_CHECKING:
    from wardrobe.application import WardrobeConfigurator
    from wardrobe.application.factory import ServiceFactory

__all__ = [
    "OUTPUT_FORMATS",
    "export_stl",
    "parse_override",
    "print_configuration",
]

OUTPUT_FORMATS = ("summary", "modules", "diagram", "json", "stl", "all")


def parse_override(raw: str) -> tuple[int, str, float]:
    """Parse an ``INDEX:FIELD=VALUE`` override option.

    Args:
        raw: Option text, e.g. ``"1:height=180"``.

    Returns:
        Tuple of (module index, field name, value).

    Raises:
        typer.BadParameter: If the text does not follow the pattern.
    """
    index_text, sep, assignment = raw.partition(":")
    field, eq, value_text = assignment.partition("=")
    if not sep or not eq or not field.strip():
        raise typer.BadParameter(
            f"Invalid override {raw!r}, expected INDEX:FIELD=VALUE (e.g. 1:height=180)"
        )
    try:
        index = int(index_text)
    except ValueError:
        raise typer.BadParameter(f"Invalid module index in override {raw!r}") from None
    try:
        value = float(value_text)
    except ValueError:
        raise typer.BadParameter(f"Invalid value in override {raw!r}") from None
    return index, field.strip().lower(), value


def export_stl(configurator: WardrobeConfigurator, output: Path) -> None:
    """Save the rendered scene of an STL-backed configurator.

    Raises:
        typer.Exit: If the configurator does not render to STL.
    """
    scene_mesh = getattr(configurator.surface, "scene_mesh", None)
    if scene_mesh is None:
        typer.echo("Error: STL export requires an STL render surface", err=True)
        raise typer.Exit(code=1)

    combined = scene_mesh()
    if combined is None:
        typer.echo("Error: Nothing to export", err=True)
        raise typer.Exit(code=1)

    output.parent.mkdir(parents=True, exist_ok=True)
    combined.save(str(output))
    typer.echo(f"STL file exported to: {output}")


def print_configuration(
    configurator: WardrobeConfigurator,
    output_format: str,
    factory: ServiceFactory,
) -> None:
    """Print the configurator state in one of the text formats."""
    summary = configurator.summary
    material = configurator.store.material

    if output_format == "summary":
        typer.echo(factory.get_summary_formatter().format(summary, material))
    elif output_format == "modules":
        controls = configurator.module_controls()
        typer.echo(factory.get_module_table_formatter().format(controls))
    elif output_format == "diagram":
        diagram = factory.get_layout_diagram_formatter()
        typer.echo(diagram.format(configurator.layout, summary))
    elif output_format == "json":
        from wardrobe.infrastructure import JsonFormatter

        typer.echo(JsonFormatter().format(configurator))
    else:
        typer.echo(factory.get_layout_diagram_formatter().format(configurator.layout))
        typer.echo()
        typer.echo(factory.get_module_table_formatter().format(configurator.module_controls()))
        typer.echo()
        typer.echo(factory.get_summary_formatter().format(summary, material))
