"""Text formatters for price breakdowns and layouts.

Money is rounded to cents here, at presentation time only. Summed rounded
line items may differ from the rounded total by a cent.
"""

from __future__ import annotations

from framing.domain import Layout, LengthUnit, PriceBreakdown, RegionKind
from framing.domain.services import UnitConverter

UNIT_SUFFIX: dict[LengthUnit, str] = {
    LengthUnit.CM: "cm",
    LengthUnit.INCH: "in",
}


def format_money(value: float) -> str:
    """Format a monetary value with two decimals."""
    return f"${value:,.2f}"


def format_length(value_cm: float, unit: LengthUnit) -> str:
    """Format a centimeter value in a display unit."""
    return f"{UnitConverter.from_cm(value_cm, unit):.2f} {UNIT_SUFFIX[unit]}"


class PriceBreakdownFormatter:
    """Formats a price breakdown as a table."""

    def format(self, price: PriceBreakdown) -> str:
        """Format the breakdown with per-piece lines and the order total."""
        if price.is_zero:
            return "PRICE\n" + "=" * 60 + "\nSelect a frame and enter the image size to see a price."

        lines = [
            "PRICE BREAKDOWN",
            "=" * 60,
            f"{'Item':<22} {'Basis':>14} {'Rate':>10} {'Amount':>11}",
            "-" * 60,
            self._line("Frame", f"{price.frame.basis:.1f} cm", f"{price.frame.rate:g}/m", price.frame.total),
        ]
        if price.mat.total:
            lines.append(self._line("Mat", f"{price.mat.basis:.0f} cm²", f"{price.mat.rate:g}", price.mat.total))
        lines.append(self._line("Glass", f"{price.glass.basis:.0f} cm²", f"{price.glass.rate:g}", price.glass.total))
        lines.append(
            self._line("Backing", f"{price.backing.basis:.0f} cm²", f"{price.backing.rate:g}", price.backing.total)
        )
        if price.printing.total:
            lines.append(
                self._line("Printing", f"{price.printing.basis:.0f} cm²", f"{price.printing.rate:g}", price.printing.total)
            )
        lines.append(self._line("Labor", "", "", price.labor))
        for extra in price.extras.items:
            lines.append(self._line(f"  {extra.value}", "", "", None))
        if price.extras.items:
            lines.append(self._line("Extras", "", "", price.extras.total))

        lines.append("-" * 60)
        lines.append(self._line("Subtotal", "", "", price.subtotal))
        lines.append(self._line("Tax", "", "", price.tax))
        lines.append(self._line("Price per piece", "", "", price.unit_total))
        if price.quantity > 1:
            lines.append(self._line("Quantity", "", "", None) + f"{price.quantity:>11}")
        lines.append("=" * 60)
        lines.append(self._line("TOTAL", "", "", price.total))
        return "\n".join(lines)

    @staticmethod
    def _line(label: str, basis: str, rate: str, amount: float | None) -> str:
        text = f"{label:<22} {basis:>14} {rate:>10} "
        if amount is not None:
            text += f"{format_money(amount):>11}"
        return text.rstrip() if amount is None else text


class LayoutSummaryFormatter:
    """Formats layout size labels and warnings in a display unit."""

    def format(self, layout: Layout, unit: LengthUnit = LengthUnit.CM) -> str:
        labels = layout.labels
        lines = ["LAYOUT", "=" * 60]
        if labels is not None:
            for name, size in (
                ("Image size", labels.image_size),
                ("Visible size", labels.visible_size),
                ("Outside size", labels.outside_size),
            ):
                lines.append(
                    f"{name:<16} {format_length(size.width, unit)} x "
                    f"{format_length(size.height, unit)}"
                )
        if layout.has_frame:
            lines.append(f"{'Frame border':<16} {format_length(layout.frame_border, unit)}")
        mats = len(layout.mat_boxes)
        lines.append(f"{'Mats':<16} {mats if mats else 'none'}")
        if layout.v_groove_box is not None:
            lines.append(f"{'V-groove':<16} yes")
        lines.append(
            f"{'Canvas':<16} {layout.canvas.width:.0f} x {layout.canvas.height:.0f} px "
            f"at {layout.px_per_cm:.2f} px/cm"
        )
        if layout.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  - {warning}" for warning in layout.warnings)
        return "\n".join(lines)


# Character drawn for each filled region kind in the ASCII diagram
DIAGRAM_FILL: dict[RegionKind, str] = {
    RegionKind.FRAME: "#",
    RegionKind.BOTTOM_MAT: ":",
    RegionKind.BOTTOM_MAT_REVEAL: ".",
    RegionKind.TOP_MAT: "=",
    RegionKind.MAT_REVEAL: ".",
    RegionKind.BEVEL_SHADOW: ".",
    RegionKind.PICTURE: " ",
    RegionKind.V_GROOVE: "+",
}


class LayoutDiagramFormatter:
    """Formats an ASCII diagram of the nested layout regions."""

    def format(self, layout: Layout, width: int = 60) -> str:
        """Paint the regions in order onto a character grid.

        The grid keeps the canvas aspect ratio, with characters assumed to
        be twice as tall as they are wide.
        """
        canvas = layout.canvas
        height = max(4, round(width * canvas.height / canvas.width / 2))
        sx = width / canvas.width
        sy = height / canvas.height
        grid = [[" " for _ in range(width)] for _ in range(height)]

        for region in layout.regions:
            rect = region.rect
            x1 = max(0, int(rect.x * sx))
            y1 = max(0, int(rect.y * sy))
            x2 = min(width - 1, int(rect.right * sx))
            y2 = min(height - 1, int(rect.bottom * sy))
            char = DIAGRAM_FILL[region.kind]
            if region.is_stroke:
                for x in range(x1, x2 + 1):
                    grid[y1][x] = char
                    grid[y2][x] = char
                for y in range(y1, y2 + 1):
                    grid[y][x1] = char
                    grid[y][x2] = char
            else:
                for y in range(y1, y2 + 1):
                    for x in range(x1, x2 + 1):
                        grid[y][x] = char

        lines = ["LAYOUT DIAGRAM", "=" * width]
        lines.extend("".join(row).rstrip() for row in grid)
        return "\n".join(lines)
