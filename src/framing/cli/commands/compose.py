"""Compose, price and layout commands for the framing CLI.

All three commands build the same order configuration, from a JSON file
given with --config, from inline options, or from both (inline options
override the file), and differ only in what they print.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from framing.application.config import (
    ConfigError,
    FramingConfiguration,
    load_config,
    merge_config_with_cli,
)
from framing.application.factory import get_factory
from framing.contracts.dtos import CompositionOutput
from framing.infrastructure import LayoutDiagramFormatter

from .output_handlers import handle_multi_format_export, parse_formats

__all__ = ["compose", "layout", "price", "run_composition"]


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
WidthOption = Annotated[
    float | None,
    typer.Option("--width", "-w", help="Image width in the document units"),
]
HeightOption = Annotated[
    float | None,
    typer.Option("--height", "-h", help="Image height in the document units"),
]
UnitsOption = Annotated[
    str | None,
    typer.Option("--units", "-u", help="Length units: cm or inch"),
]
SizeOption = Annotated[
    str | None,
    typer.Option("--size", help="Standard print size instead of width/height (e.g. 8x10, A4)"),
]
FrameOption = Annotated[
    str | None,
    typer.Option("--frame", "-f", help="Frame catalog id (e.g. 103F)"),
]
MatStyleOption = Annotated[
    str | None,
    typer.Option("--mat-style", help="Mat style: none, single, double"),
]
MatWidthOption = Annotated[
    float | None,
    typer.Option("--mat-width", help="Uniform mat width in the document units"),
]
MatBoardOption = Annotated[
    str | None,
    typer.Option("--mat-board", help="Top mat board catalog id"),
]
BottomBoardOption = Annotated[
    str | None,
    typer.Option("--bottom-board", help="Bottom mat board catalog id (double mat)"),
]
VGrooveOption = Annotated[
    bool | None,
    typer.Option("--v-groove/--no-v-groove", help="Cut a decorative V-groove"),
]
GlassOption = Annotated[
    str | None,
    typer.Option("--glass", help="Glazing: clear, uv, anti-glare, museum"),
]
BackingOption = Annotated[
    str | None,
    typer.Option("--backing", help="Backing: standard, foam, archival, conservation"),
]
ExtraOption = Annotated[
    list[str] | None,
    typer.Option("--extra", "-e", help="Extra service (repeatable)"),
]
PrintOption = Annotated[
    str | None,
    typer.Option("--print", help="Print service: standard, premium, professional"),
]
QuantityOption = Annotated[
    int | None,
    typer.Option("--quantity", "-q", help="Number of identical pieces"),
]
OutputFormatsOption = Annotated[
    str | None,
    typer.Option("--output-formats", help="Comma-separated export formats: svg,dxf,json (or 'all')"),
]
OutputDirOption = Annotated[
    Path | None,
    typer.Option("--output-dir", help="Output directory for exported files"),
]
ProjectNameOption = Annotated[
    str | None,
    typer.Option("--project-name", help="Project name for output file naming"),
]


def resolve_configuration(config_file: Path | None, **overrides) -> FramingConfiguration:
    """Load the configuration file (if any) and apply inline overrides.

    Raises:
        typer.Exit: With code 1 on any configuration error.
    """
    config = None
    try:
        if config_file is not None:
            config = load_config(config_file)
        return merge_config_with_cli(config, **overrides)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def run_composition(config: FramingConfiguration) -> CompositionOutput:
    """Compose an order through the default factory.

    Raises:
        typer.Exit: With code 1 if a catalog reference cannot be resolved.
    """
    factory = get_factory()
    command = factory.create_compose_command()
    try:
        result = command.execute_config(config, factory.get_catalog())
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not result.is_valid:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)
    return result


def _export_requested(
    config: FramingConfiguration,
    result: CompositionOutput,
) -> None:
    formats = config.output.formats
    if not formats:
        return
    formats = parse_formats(",".join(formats))
    output_dir = Path(config.output.output_dir) if config.output.output_dir else None
    handle_multi_format_export(formats, output_dir, config.output.project_name, result)


def _output_overrides(
    output_formats: str | None,
    output_dir: Path | None,
    project_name: str | None,
) -> dict:
    formats = None
    if output_formats is not None:
        formats = parse_formats(output_formats)
    return {
        "output_formats": formats,
        "output_dir": str(output_dir) if output_dir is not None else None,
        "project_name": project_name,
    }


def compose(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    units: UnitsOption = None,
    size: SizeOption = None,
    frame: FrameOption = None,
    mat_style: MatStyleOption = None,
    mat_width: MatWidthOption = None,
    mat_board: MatBoardOption = None,
    bottom_board: BottomBoardOption = None,
    v_groove: VGrooveOption = None,
    glass: GlassOption = None,
    backing: BackingOption = None,
    extra: ExtraOption = None,
    print_option: PrintOption = None,
    quantity: QuantityOption = None,
    output_formats: OutputFormatsOption = None,
    output_dir: OutputDirOption = None,
    project_name: ProjectNameOption = None,
) -> None:
    """Lay out and price a framing order.

    Prints the size labels, the layout summary and the price breakdown, and
    exports files when output formats are requested.

    Examples:
        framing compose --width 20 --height 30 --frame 103F
        framing compose -c order.json --quantity 3 --output-formats svg,json
    """
    config = resolve_configuration(
        config_file,
        width=width,
        height=height,
        units=units,
        standard_size=size,
        frame=frame,
        mat_style=mat_style,
        mat_width=mat_width,
        mat_board=mat_board,
        bottom_board=bottom_board,
        v_groove=v_groove,
        glass=glass,
        backing=backing,
        extras=extra,
        print_option=print_option,
        quantity=quantity,
        **_output_overrides(output_formats, output_dir, project_name),
    )
    result = run_composition(config)

    factory = get_factory()
    typer.echo(factory.get_layout_formatter().format(result.layout, config.units))
    typer.echo()
    typer.echo(factory.get_price_formatter().format(result.price))

    _export_requested(config, result)


def price(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    units: UnitsOption = None,
    size: SizeOption = None,
    frame: FrameOption = None,
    mat_style: MatStyleOption = None,
    mat_width: MatWidthOption = None,
    mat_board: MatBoardOption = None,
    bottom_board: BottomBoardOption = None,
    glass: GlassOption = None,
    backing: BackingOption = None,
    extra: ExtraOption = None,
    print_option: PrintOption = None,
    quantity: QuantityOption = None,
) -> None:
    """Show the itemized price of a framing order."""
    config = resolve_configuration(
        config_file,
        width=width,
        height=height,
        units=units,
        standard_size=size,
        frame=frame,
        mat_style=mat_style,
        mat_width=mat_width,
        mat_board=mat_board,
        bottom_board=bottom_board,
        glass=glass,
        backing=backing,
        extras=extra,
        print_option=print_option,
        quantity=quantity,
    )
    result = run_composition(config)
    typer.echo(get_factory().get_price_formatter().format(result.price))


def layout(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    units: UnitsOption = None,
    size: SizeOption = None,
    frame: FrameOption = None,
    mat_style: MatStyleOption = None,
    mat_width: MatWidthOption = None,
    mat_board: MatBoardOption = None,
    bottom_board: BottomBoardOption = None,
    v_groove: VGrooveOption = None,
    diagram: Annotated[
        bool,
        typer.Option("--diagram/--no-diagram", help="Also draw an ASCII diagram"),
    ] = False,
    output_formats: OutputFormatsOption = None,
    output_dir: OutputDirOption = None,
    project_name: ProjectNameOption = None,
) -> None:
    """Show the size labels and layout of a framing order."""
    config = resolve_configuration(
        config_file,
        width=width,
        height=height,
        units=units,
        standard_size=size,
        frame=frame,
        mat_style=mat_style,
        mat_width=mat_width,
        mat_board=mat_board,
        bottom_board=bottom_board,
        v_groove=v_groove,
        **_output_overrides(output_formats, output_dir, project_name),
    )
    result = run_composition(config)

    typer.echo(get_factory().get_layout_formatter().format(result.layout, config.units))
    if diagram:
        typer.echo()
        typer.echo(LayoutDiagramFormatter().format(result.layout))

    _export_requested(config, result)
