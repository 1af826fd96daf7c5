"""Catalog commands for browsing frames, mat boards and print sizes.

This module provides the `catalog` command group with one listing
subcommand per kind of catalog entry.
"""

from typing import Annotated

import typer

from framing.application.factory import get_factory
from framing.domain import FrameMaterial
from framing.infrastructure import format_money

catalog_app = typer.Typer(
    name="catalog",
    help="Browse the frame, mat board and print size catalog.",
)


@catalog_app.command(name="frames")
def list_frames(
    material: Annotated[
        FrameMaterial | None,
        typer.Option("--material", "-m", help="Only frames of this material"),
    ] = None,
    category: Annotated[
        str | None,
        typer.Option("--category", help="Only frames in this category"),
    ] = None,
) -> None:
    """List frame mouldings.

    Example:
        framing catalog frames --material Wood --category Popular
    """
    frames = get_factory().get_catalog().list_frames(material=material, category=category)
    if not frames:
        typer.echo("No frames match.")
        return

    typer.echo(
        f"{'ID':<10} {'Material':<10} {'Color':<14} {'Width':>7} {'Rebate':>7} {'Per m':>9}"
    )
    typer.echo("-" * 62)
    for frame in frames:
        typer.echo(
            f"{frame.id:<10} {frame.material.value:<10} {frame.color.value:<14} "
            f"{frame.width:>5.1f}cm {frame.rebate:>5.1f}cm "
            f"{format_money(frame.price_rate_per_meter):>9}"
        )
    typer.echo()
    typer.echo(f"{len(frames)} frame(s)")


@catalog_app.command(name="mats")
def list_mats() -> None:
    """List mat boards."""
    boards = get_factory().get_catalog().list_mat_boards()
    typer.echo(f"{'ID':<5} {'Name':<36} {'Color':<9} {'Core'}")
    typer.echo("-" * 62)
    for board in boards:
        typer.echo(f"{board.id:<5} {board.name:<36} {board.color:<9} {board.core.value}")


@catalog_app.command(name="sizes")
def list_sizes() -> None:
    """List standard print sizes."""
    sizes = get_factory().get_catalog().list_standard_sizes()
    typer.echo(f"{'Name':<8} {'Size (cm)':<14} {'Size (in)'}")
    typer.echo("-" * 40)
    for size in sizes:
        typer.echo(
            f"{size.name:<8} {size.width:g} x {size.height:g}".ljust(23)
            + f" {size.width_inch:g} x {size.height_inch:g}"
        )
