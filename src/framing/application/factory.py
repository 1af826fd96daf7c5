"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from framing.application.catalog import CatalogManager
    from framing.application.commands import ComposeFrameCommand
    from framing.contracts.formatters import (
        LayoutSummaryFormatterProtocol,
        PriceFormatterProtocol,
    )
    from framing.contracts.protocols import LayoutEngineProtocol, PricingEngineProtocol
    from framing.infrastructure.exporters import ExportManager


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation so tests can inject engines or a
    catalog, and so the CLI and the web API share one construction path.

    Example:
        ```python
        factory = ServiceFactory()
        command = factory.create_compose_command()
        output = command.execute_config(config, factory.get_catalog())
        ```
    """

    _layout_engine: "LayoutEngineProtocol | None" = field(
        default=None, init=False, repr=False
    )
    _pricing_engine: "PricingEngineProtocol | None" = field(
        default=None, init=False, repr=False
    )
    _catalog: "CatalogManager | None" = field(default=None, init=False, repr=False)

    def get_layout_engine(self) -> "LayoutEngineProtocol":
        """Get or create layout engine instance."""
        if self._layout_engine is None:
            from framing.domain.services import LayoutEngine

            self._layout_engine = LayoutEngine()
        return self._layout_engine

    def get_pricing_engine(self) -> "PricingEngineProtocol":
        """Get or create pricing engine instance."""
        if self._pricing_engine is None:
            from framing.domain.services import PricingEngine

            self._pricing_engine = PricingEngine()
        return self._pricing_engine

    def get_catalog(self) -> "CatalogManager":
        """Get or create the catalog (parsed once, then cached)."""
        if self._catalog is None:
            from framing.application.catalog import CatalogManager

            self._catalog = CatalogManager()
        return self._catalog

    def set_catalog(self, catalog: "CatalogManager") -> None:
        """Replace the catalog (for testing)."""
        self._catalog = catalog

    def get_price_formatter(self) -> "PriceFormatterProtocol":
        from framing.infrastructure.formatters import PriceBreakdownFormatter

        return PriceBreakdownFormatter()

    def get_layout_formatter(self) -> "LayoutSummaryFormatterProtocol":
        from framing.infrastructure.formatters import LayoutSummaryFormatter

        return LayoutSummaryFormatter()

    def get_export_manager(self, output_dir: Path) -> "ExportManager":
        """Create an export manager writing into ``output_dir``."""
        from framing.infrastructure.exporters import ExportManager

        return ExportManager(output_dir)

    def create_compose_command(self) -> "ComposeFrameCommand":
        """Create a ComposeFrameCommand wired to this factory's engines."""
        from framing.application.commands import ComposeFrameCommand

        return ComposeFrameCommand(
            layout_engine=self.get_layout_engine(),
            pricing_engine=self.get_pricing_engine(),
        )


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
