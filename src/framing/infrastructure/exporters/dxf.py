"""DXF format exporter for mat cutters.

Generates 2D DXF drawings (R2010 format) with one closed outline per layout
region, each on a layer named after the region kind. Coordinates are in
centimeters with the origin at the bottom-left of the canvas.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf
from ezdxf import units

from framing.domain import Layout, Rect, RegionKind
from framing.infrastructure.exporters.base import ExporterRegistry, require_layout

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from framing.contracts.dtos import CompositionOutput


logger = logging.getLogger(__name__)


# ACI color per region layer
LAYERS: dict[RegionKind, int] = {
    RegionKind.FRAME: 7,  # White - frame outline
    RegionKind.BOTTOM_MAT: 4,  # Cyan - bottom mat window
    RegionKind.BOTTOM_MAT_REVEAL: 8,  # Grey - bottom mat reveal
    RegionKind.TOP_MAT: 5,  # Blue - top mat window
    RegionKind.MAT_REVEAL: 8,  # Grey - top mat reveal
    RegionKind.BEVEL_SHADOW: 8,  # Grey - bevel
    RegionKind.PICTURE: 3,  # Green - mat opening / picture
    RegionKind.V_GROOVE: 1,  # Red - groove cut
}
LABEL_LAYER = "LABELS"
LABEL_COLOR = 2  # Yellow
LABEL_HEIGHT_CM = 0.8


def layer_name(kind: RegionKind) -> str:
    """DXF layer name for a region kind."""
    return kind.value.upper()


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports frame layouts to DXF for mat cutting and CAD review.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, include_cosmetic: bool = False, include_labels: bool = True) -> None:
        """Initialize the DXF exporter.

        Args:
            include_cosmetic: Also draw reveal and bevel shadow regions, which
                are preview effects rather than cuts.
            include_labels: Add an outside size label under the drawing.
        """
        self.include_cosmetic = include_cosmetic
        self.include_labels = include_labels

    def export(self, output: CompositionOutput, path: Path) -> None:
        """Export the layout to a DXF file.

        Raises:
            ExportError: If the composition has no layout.
        """
        layout = require_layout(output, self.format_name)
        doc = self._build_document(layout)
        doc.saveas(path)
        logger.info(f"Exported DXF drawing to {path}")

    def export_string(self, output: CompositionOutput) -> str:
        """Export the layout as DXF text.

        Raises:
            ExportError: If the composition has no layout.
        """
        layout = require_layout(output, self.format_name)
        doc = self._build_document(layout)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def _build_document(self, layout: Layout) -> Drawing:
        doc = ezdxf.new("R2010")
        doc.units = units.CM
        for kind, color in LAYERS.items():
            doc.layers.add(layer_name(kind), color=color)
        doc.layers.add(LABEL_LAYER, color=LABEL_COLOR)

        msp = doc.modelspace()
        cosmetic = {
            RegionKind.MAT_REVEAL,
            RegionKind.BOTTOM_MAT_REVEAL,
            RegionKind.BEVEL_SHADOW,
        }
        for region in layout.regions:
            if region.kind in cosmetic and not self.include_cosmetic:
                continue
            self._draw_outline(msp, layout, region.rect, layer_name(region.kind))

        if self.include_labels and layout.labels is not None:
            outside = layout.labels.outside_size
            msp.add_text(
                f"{outside.width:.1f} x {outside.height:.1f} cm",
                height=LABEL_HEIGHT_CM,
                dxfattribs={"layer": LABEL_LAYER},
            ).set_placement((0.0, -2 * LABEL_HEIGHT_CM))
        return doc

    @staticmethod
    def _draw_outline(msp: Modelspace, layout: Layout, rect: Rect, layer: str) -> None:
        """Draw a rectangle as a closed polyline in cm, y axis pointing up."""
        scale = 1.0 / layout.px_per_cm
        canvas_h = layout.canvas.height
        x1 = rect.x * scale
        x2 = rect.right * scale
        y1 = (canvas_h - rect.bottom) * scale
        y2 = (canvas_h - rect.y) * scale
        points = [(x1, y1), (x2, y1), (x2, y2), (x1, y2)]
        msp.add_lwpolyline(points, close=True, dxfattribs={"layer": layer})
