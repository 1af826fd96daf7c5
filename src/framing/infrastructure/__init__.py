"""Infrastructure layer - formatters and render adapters."""

from .formatters import (
    LayoutDiagramFormatter,
    LayoutSummaryFormatter,
    PriceBreakdownFormatter,
    format_length,
    format_money,
)

# Exporter framework from exporters/ package
from .exporters import (
    ExportError,
    Exporter,
    ExporterRegistry,
    ExportManager,
    UnsupportedFormatError,
)

__all__ = [
    # Formatters
    "LayoutDiagramFormatter",
    "LayoutSummaryFormatter",
    "PriceBreakdownFormatter",
    "format_length",
    "format_money",
    # Exporters
    "ExportError",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "UnsupportedFormatError",
]
