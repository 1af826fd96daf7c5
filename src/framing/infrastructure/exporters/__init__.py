"""Exporter framework for frame compositions.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- dxf: DXF outlines on per-region layers for mat cutters and CAD
- json: Layout regions, size labels and price breakdown
- svg: Flat-color preview of the framed picture with size labels

Usage:
    from framing.infrastructure.exporters import ExportManager, ExporterRegistry

    # List available formats
    formats = ExporterRegistry.available_formats()

    # Get a specific exporter
    svg_exporter = ExporterRegistry.get("svg")(show_labels=False)
    svg_text = svg_exporter.export_string(output)

    # Export to multiple formats
    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["svg", "dxf"], output, project_name="portrait")
"""

from framing.infrastructure.exporters.base import (
    Exporter,
    ExportError,
    ExporterRegistry,
    ExportManager,
    UnsupportedFormatError,
)

# Import exporters to trigger registration
from framing.infrastructure.exporters.dxf import DxfExporter
from framing.infrastructure.exporters.json_exporter import (
    JsonExporter,
    composition_to_dict,
    layout_to_dict,
    price_to_dict,
)
from framing.infrastructure.exporters.svg import SvgExporter

__all__ = [
    # Framework
    "ExportError",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "UnsupportedFormatError",
    # Registered exporters
    "DxfExporter",
    "JsonExporter",
    "SvgExporter",
    # Serialization helpers
    "composition_to_dict",
    "layout_to_dict",
    "price_to_dict",
]
