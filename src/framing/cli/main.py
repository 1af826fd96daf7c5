"""Typer CLI for frame composition and pricing."""

import typer

from framing.cli.commands import (
    catalog_app,
    compose,
    layout,
    price,
    validate_command,
)

app = typer.Typer(
    name="framing",
    help="Lay out and price custom picture framing orders.",
)

app.command(name="compose")(compose)
app.command(name="price")(price)
app.command(name="layout")(layout)

# Register validate command
app.command(name="validate")(validate_command)

# Register catalog subcommand group
app.add_typer(catalog_app, name="catalog")


if __name__ == "__main__":
    app()
