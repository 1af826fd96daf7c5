"""CLI command implementations for the framing application.

This package contains the subcommands for the framing CLI:
- compose, price, layout: Lay out and price an order
- validate: Validate a configuration file
- catalog: Browse the bundled catalog
"""

from framing.cli.commands.catalog import catalog_app
from framing.cli.commands.compose import compose, layout, price
from framing.cli.commands.validate import validate_command

__all__ = ["catalog_app", "compose", "layout", "price", "validate_command"]
