"""Validate command for checking framing order files.

Reports the order being checked, then blocking errors and advisories
grouped by the part of the order they concern (image, frame, mat).
"""

from pathlib import Path
from typing import Annotated

import typer

from framing.application.config import (
    ConfigError,
    FramingConfiguration,
    ValidationResult,
    load_config,
    validate_config,
)
from framing.application.factory import get_factory
from framing.domain import MatStyle

# Where to look up valid ids for a catalog reference
CATALOG_LISTINGS: dict[str, str] = {
    "frame": "framing catalog frames",
    "mat.top_board": "framing catalog mats",
    "mat.bottom_board": "framing catalog mats",
    "image.standard_size": "framing catalog sizes",
}


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a framing order configuration file.

    Checks the file for JSON syntax, schema errors, unknown catalog ids and
    framing advisories (rebate, mat widths, V-groove, image size).

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        framing validate order.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _echo_load_error(e)
        raise typer.Exit(code=1)

    _echo_order_summary(config)
    result = validate_config(config, get_factory().get_catalog())
    _echo_result(result)
    raise typer.Exit(code=result.exit_code)


def _ref_id(ref: object) -> str:
    if ref is None:
        return "none"
    return ref if isinstance(ref, str) else getattr(ref, "id", "inline")


def _echo_order_summary(config: FramingConfiguration) -> None:
    image = config.image
    if image.standard_size is not None:
        size = f"standard size {image.standard_size}"
    else:
        size = f"custom size in {config.units.value}"

    mat = config.mat
    if mat.style is MatStyle.NONE:
        mat_text = "none"
    elif mat.style is MatStyle.DOUBLE:
        mat_text = f"double ({_ref_id(mat.top_board)} over {_ref_id(mat.bottom_board)})"
    else:
        mat_text = f"single ({_ref_id(mat.top_board)})"
    if mat.v_groove:
        mat_text += ", V-groove"

    typer.echo(f"  Image     {size}")
    typer.echo(f"  Frame     {_ref_id(config.frame)}")
    typer.echo(f"  Mat       {mat_text}")
    typer.echo(f"  Quantity  {config.quantity}")
    typer.echo()


def _echo_load_error(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            typer.echo(
                f"    Line {detail.get('line', '?')}, column {detail.get('column', '?')}: "
                f"{detail.get('message', 'unknown error')}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail.get('path') or '(document)'}: {detail.get('message')}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, dict):
                typer.echo(f"    Got: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _section(path: str) -> str:
    return path.split(".", 1)[0].split("[", 1)[0] or "order"


def _echo_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            listing = CATALOG_LISTINGS.get(error.path)
            if listing is not None:
                typer.echo(f"    Valid ids: run `{listing}`", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        sections: dict[str, list] = {}
        for warning in result.warnings:
            sections.setdefault(_section(warning.path), []).append(warning)
        for section, warnings in sections.items():
            typer.echo(f"  [{section}]")
            for warning in warnings:
                typer.echo(f"    {warning.path}: {warning.message}")
                if warning.suggestion:
                    typer.echo(f"      Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
