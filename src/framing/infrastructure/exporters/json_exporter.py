"""JSON exporter for compositions.

Serializes the layout (paint regions, boxes, size labels) and the price
breakdown. Values are unrounded; consumers round at presentation time.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from framing.domain import Layout, PriceBreakdown, Rect, Size2D
from framing.infrastructure.exporters.base import ExporterRegistry, require_layout

if TYPE_CHECKING:
    from framing.contracts.dtos import CompositionOutput
    from framing.domain import LineItem


logger = logging.getLogger(__name__)


# Current schema version for JSON output
SCHEMA_VERSION = "1.0"


def _size(size: Size2D) -> dict[str, float]:
    return {"width": size.width, "height": size.height}


def _rect(rect: Rect | None) -> dict[str, float] | None:
    if rect is None:
        return None
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}


def _line(item: LineItem) -> dict[str, float]:
    return {"basis": item.basis, "rate": item.rate, "total": item.total}


def layout_to_dict(layout: Layout) -> dict[str, Any]:
    """Convert a layout to JSON-compatible data."""
    labels = None
    if layout.labels is not None:
        labels = {
            "image_size": _size(layout.labels.image_size),
            "visible_size": _size(layout.labels.visible_size),
            "outside_size": _size(layout.labels.outside_size),
        }
    return {
        "canvas": _size(layout.canvas),
        "px_per_cm": layout.px_per_cm,
        "frame_border_cm": layout.frame_border,
        "picture_box": _rect(layout.picture_box),
        "mat_boxes": [_rect(box) for box in layout.mat_boxes],
        "outer_frame_box": _rect(layout.outer_frame_box),
        "v_groove_box": _rect(layout.v_groove_box),
        "labels_cm": labels,
        "regions": [
            {
                "kind": region.kind.value,
                "rect": _rect(region.rect),
                "fill": region.fill,
                "stroke": region.stroke,
                "line_width": region.line_width,
                "opacity": region.opacity,
            }
            for region in layout.regions
        ],
        "warnings": list(layout.warnings),
    }


def price_to_dict(price: PriceBreakdown) -> dict[str, Any]:
    """Convert a price breakdown to JSON-compatible data."""
    return {
        "frame": _line(price.frame),
        "mat": _line(price.mat),
        "glass": _line(price.glass),
        "backing": _line(price.backing),
        "printing": _line(price.printing),
        "extras": {
            "items": [extra.value for extra in price.extras.items],
            "total": price.extras.total,
        },
        "labor": price.labor,
        "subtotal": price.subtotal,
        "tax": price.tax,
        "unit_total": price.unit_total,
        "quantity": price.quantity,
        "total": price.total,
    }


def composition_to_dict(output: CompositionOutput) -> dict[str, Any]:
    """Convert a composition to JSON-compatible data.

    Raises:
        ExportError: If the composition has no layout.
    """
    layout = require_layout(output, "json")
    data: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "layout": layout_to_dict(layout),
        "price": price_to_dict(output.price) if output.price is not None else None,
        "warnings": list(output.warnings),
    }
    if output.order is not None:
        frame = output.order.frame
        data["order"] = {
            "units": output.order.units.value,
            "frame_id": frame.id if frame is not None else None,
            "mat_style": output.order.mat.style.value,
            "glass": output.order.glass.value,
            "backing": output.order.backing.value,
            "quantity": output.order.quantity,
        }
    return data


@ExporterRegistry.register("json")
class JsonExporter:
    """Exports a composition's layout and price as JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: CompositionOutput, path: Path) -> None:
        """Export the composition to a JSON file."""
        path.write_text(self.export_string(output))
        logger.info(f"Exported JSON composition to {path}")

    def export_string(self, output: CompositionOutput) -> str:
        """Export the composition as a JSON string."""
        return json.dumps(composition_to_dict(output), indent=self.indent)
