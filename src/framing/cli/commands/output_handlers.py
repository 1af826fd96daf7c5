"""Output format handling functions for the framing CLI.

This module exports a composition to the registered file formats
(SVG, DXF, JSON) requested on the command line or in the configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

from framing.infrastructure.exporters import (
    ExportError,
    ExporterRegistry,
    ExportManager,
)

if TYPE_CHECKING:
    from framing.contracts.dtos import CompositionOutput

__all__ = [
    "handle_multi_format_export",
    "parse_formats",
]


def parse_formats(output_formats_str: str) -> list[str]:
    """Parse a comma-separated format list, expanding "all".

    Raises:
        typer.Exit: With code 1 if any format is unknown.
    """
    if output_formats_str.strip().lower() == "all":
        return ExporterRegistry.available_formats()

    formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    return formats


def handle_multi_format_export(
    formats: list[str],
    output_dir: Path | None,
    project_name: str,
    result: CompositionOutput,
) -> dict[str, Path]:
    """Export a composition to several formats and report the files.

    Args:
        formats: Registered format names.
        output_dir: Output directory for exported files (default: cwd).
        project_name: Project name for file naming.
        result: The composition to export.

    Returns:
        Mapping of format name to written file.

    Raises:
        typer.Exit: With code 1 if nothing can be exported.
    """
    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, result, project_name)
    except (ExportError, KeyError, OSError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")

    return files
