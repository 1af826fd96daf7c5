"""SVG format exporter for frame previews.

Paints the layout regions in their paint order as flat ``<rect>`` elements,
then adds the customer-facing size labels below the drawing.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar
from xml.sax.saxutils import escape

from framing.domain import Layout, LengthUnit, Region
from framing.infrastructure.exporters.base import ExporterRegistry, require_layout
from framing.infrastructure.formatters import format_length

if TYPE_CHECKING:
    from framing.contracts.dtos import CompositionOutput

logger = logging.getLogger(__name__)


LABEL_LINE_HEIGHT = 18
LABEL_FONT_SIZE = 12
BACKGROUND_COLOR = "#ffffff"


@ExporterRegistry.register("svg")
class SvgExporter:
    """Exports a frame preview as an SVG document.

    Attributes:
        format_name: "svg"
        file_extension: "svg"
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        show_labels: bool = True,
        label_unit: LengthUnit | None = None,
        background: str = BACKGROUND_COLOR,
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            show_labels: Whether to add image/visible/outside size labels.
            label_unit: Unit the labels are printed in. Defaults to the
                order's display units, or cm without an order.
            background: Canvas background color.
        """
        self.show_labels = show_labels
        self.label_unit = label_unit
        self.background = background

    def export(self, output: CompositionOutput, path: Path) -> None:
        """Export the SVG preview to a file.

        Raises:
            ExportError: If the composition has no layout.
        """
        path.write_text(self.export_string(output))
        logger.info(f"Exported SVG preview to {path}")

    def export_string(self, output: CompositionOutput) -> str:
        """Export the SVG preview as a string.

        Raises:
            ExportError: If the composition has no layout.
        """
        layout = require_layout(output, self.format_name)
        unit = self.label_unit
        if unit is None and output.order is not None:
            unit = output.order.units
        return self.render(layout, unit)

    def render(self, layout: Layout, unit: LengthUnit | None = None) -> str:
        """Render a layout as a standalone SVG document.

        ``unit`` overrides ``label_unit`` for this call; cm when both are unset.
        """
        unit = unit or self.label_unit or LengthUnit.CM
        label_lines = self._label_lines(layout, unit) if self.show_labels else []
        width = layout.canvas.width
        height = layout.canvas.height + len(label_lines) * LABEL_LINE_HEIGHT

        parts = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg width="{width:.2f}" height="{height:.2f}" '
            f'viewBox="0 0 {width:.2f} {height:.2f}" '
            'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{width:.2f}" height="{height:.2f}" '
            f'fill="{escape(self.background)}"/>',
        ]
        parts.extend(self._render_region(region) for region in layout.regions)

        baseline = layout.canvas.height
        for i, text in enumerate(label_lines):
            y = baseline + (i + 1) * LABEL_LINE_HEIGHT - 4
            parts.append(
                f'  <text x="{width / 2:.2f}" y="{y:.2f}" text-anchor="middle" '
                f'font-family="sans-serif" font-size="{LABEL_FONT_SIZE}">'
                f"{escape(text)}</text>"
            )

        parts.append("</svg>")
        return "\n".join(parts)

    @staticmethod
    def _render_region(region: Region) -> str:
        rect = region.rect
        attrs = (
            f'x="{rect.x:.2f}" y="{rect.y:.2f}" '
            f'width="{rect.width:.2f}" height="{rect.height:.2f}"'
        )
        if region.is_stroke:
            paint = (
                f'fill="none" stroke="{escape(region.stroke)}" '
                f'stroke-width="{region.line_width:g}"'
            )
        else:
            paint = f'fill="{escape(region.fill)}"'
        if region.opacity < 1.0:
            paint += f' opacity="{region.opacity:g}"'
        return f'  <rect class="{region.kind.value}" {attrs} {paint}/>'

    def _label_lines(self, layout: Layout, unit: LengthUnit) -> list[str]:
        if layout.labels is None:
            return []
        return [
            f"{name}: {format_length(size.width, unit)} x {format_length(size.height, unit)}"
            for name, size in (
                ("Image", layout.labels.image_size),
                ("Visible", layout.labels.visible_size),
                ("Outside", layout.labels.outside_size),
            )
        ]
