"""Layout engine: turns an order configuration into paintable rectangles.

The layout is built innermost first: the picture box is placed, the top mat
box is grown around it, the bottom mat box around that, and the frame border
around the whole composite. The resulting regions are listed in paint order
so any 2D surface (canvas, SVG, DXF) can draw them with flat fills.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..entities import OrderConfiguration
from ..value_objects import (
    Layout,
    Rect,
    Region,
    RegionKind,
    SideWidths,
    Size2D,
    SizeLabels,
)
from .geometry import NormalizedOrder, normalize_order

logger = logging.getLogger(__name__)


REVEAL_BORDER_PX = 4.0
REVEAL_COLOR = "#ffffff"
BEVEL_SHADOW_PX = 2.0
BEVEL_SHADOW_COLOR = "#000000"
BEVEL_SHADOW_OPACITY = 0.15
V_GROOVE_GAP_PX = 35.0
V_GROOVE_LINE_WIDTH = 1.0
PICTURE_PLACEHOLDER_FILL = "#f0f0f0"


@dataclass(frozen=True)
class RenderSurface:
    """Drawing surface the layout is computed for.

    Attributes:
        padding_px: Empty margin around the frame on every side.
        px_per_cm: Requested scale.
        max_width_px: Largest canvas width the surface can render.
        max_height_px: Largest canvas height the surface can render.
    """

    padding_px: float = 40.0
    px_per_cm: float = 10.0
    max_width_px: float = 1500.0
    max_height_px: float = 2000.0

    def __post_init__(self) -> None:
        if self.px_per_cm <= 0:
            raise ValueError("px_per_cm must be positive")
        if self.padding_px < 0:
            raise ValueError("padding_px must be non-negative")
        if (
            self.max_width_px <= 2 * self.padding_px
            or self.max_height_px <= 2 * self.padding_px
        ):
            raise ValueError("Maximum canvas size must exceed twice the padding")


class LayoutEngine:
    """Computes the nested frame/mat/picture rectangles for an order.

    Pure and stateless: the same configuration and surface always yield an
    equal layout, so instances can be shared between callers.

    Example:
        >>> engine = LayoutEngine()
        >>> layout = engine.compute_layout(order, RenderSurface(px_per_cm=8))
        >>> for region in layout.regions:
        ...     paint(region)
    """

    def compute_layout(
        self,
        config: OrderConfiguration,
        surface: RenderSurface | None = None,
    ) -> Layout:
        """Compute the layout of a configuration on a surface.

        Never raises for out-of-range numbers. Without a frame, only the
        picture box is produced.

        Args:
            config: Order configuration snapshot.
            surface: Target surface (defaults to ``RenderSurface()``).

        Returns:
            The computed layout.
        """
        surface = surface or RenderSurface()
        order = normalize_order(config)
        warnings = list(order.warnings)
        if config.mat.v_groove and not order.v_groove:
            warnings.append("V-groove requested without an active mat; groove skipped")

        if order.frame is None:
            warnings.append("No frame selected; only the picture is laid out")
            return self._picture_only_layout(order, surface, warnings)

        border = order.frame_border
        matted = order.matted_size
        extent = Size2D(width=matted.width + 2 * border, height=matted.height + 2 * border)
        px_per_cm = self._fit_scale(extent, surface, warnings)
        pad = surface.padding_px
        logger.debug(
            f"Frame border {border:.3f} cm, extent {extent.width:.2f} x "
            f"{extent.height:.2f} cm at {px_per_cm:.3f} px/cm"
        )

        outer = Rect(
            x=pad,
            y=pad,
            width=extent.width * px_per_cm,
            height=extent.height * px_per_cm,
        )
        picture = Rect(
            x=pad + (border + order.bottom_reveal.left + order.mat_sides.left) * px_per_cm,
            y=pad + (border + order.bottom_reveal.top + order.mat_sides.top) * px_per_cm,
            width=order.image.width * px_per_cm,
            height=order.image.height * px_per_cm,
        )

        regions: list[Region] = [
            Region(kind=RegionKind.FRAME, rect=outer, fill=order.frame.fill_color)
        ]
        mat_boxes: list[Rect] = []
        groove_base = picture

        if order.mat_active:
            mat = config.mat
            top_sides_px = order.mat_sides.scaled(px_per_cm)
            top_box = picture.inflate_sides(top_sides_px)
            mat_boxes.append(top_box)

            if order.mat_double:
                bottom_sides_px = order.bottom_reveal.scaled(px_per_cm)
                bottom_box = top_box.inflate_sides(bottom_sides_px)
                mat_boxes.append(bottom_box)
                groove_base = bottom_box
                regions.append(
                    Region(
                        kind=RegionKind.BOTTOM_MAT,
                        rect=bottom_box,
                        fill=mat.bottom_board.color,
                    )
                )
                reveal = min(REVEAL_BORDER_PX, bottom_sides_px.maximum)
                if reveal > 0:
                    regions.append(
                        Region(
                            kind=RegionKind.BOTTOM_MAT_REVEAL,
                            rect=self._ring(top_box, bottom_sides_px, reveal),
                            fill=REVEAL_COLOR,
                        )
                    )

            regions.append(
                Region(kind=RegionKind.TOP_MAT, rect=top_box, fill=mat.top_board.color)
            )
            reveal = min(REVEAL_BORDER_PX, top_sides_px.maximum)
            if reveal > 0:
                regions.append(
                    Region(
                        kind=RegionKind.MAT_REVEAL,
                        rect=self._ring(picture, top_sides_px, reveal),
                        fill=REVEAL_COLOR,
                    )
                )
                bevel = min(BEVEL_SHADOW_PX, reveal)
                regions.append(
                    Region(
                        kind=RegionKind.BEVEL_SHADOW,
                        rect=self._ring(picture, top_sides_px, bevel),
                        fill=BEVEL_SHADOW_COLOR,
                        opacity=BEVEL_SHADOW_OPACITY,
                    )
                )

        regions.append(
            Region(kind=RegionKind.PICTURE, rect=picture, fill=PICTURE_PLACEHOLDER_FILL)
        )

        v_groove_box = None
        if order.v_groove:
            outermost_board = (
                config.mat.bottom_board if order.mat_double else config.mat.top_board
            )
            v_groove_box = groove_base.inflate(V_GROOVE_GAP_PX)
            regions.append(
                Region(
                    kind=RegionKind.V_GROOVE,
                    rect=v_groove_box,
                    stroke=outermost_board.core_color,
                    line_width=V_GROOVE_LINE_WIDTH,
                )
            )

        labels = self._labels(order, order.outside_size, warnings)
        return Layout(
            canvas=Size2D(
                width=outer.width + 2 * pad,
                height=outer.height + 2 * pad,
            ),
            px_per_cm=px_per_cm,
            picture_box=picture,
            mat_boxes=tuple(mat_boxes),
            outer_frame_box=outer,
            v_groove_box=v_groove_box,
            frame_border=border,
            labels=labels,
            regions=tuple(regions),
            warnings=tuple(warnings),
        )

    def _picture_only_layout(
        self,
        order: NormalizedOrder,
        surface: RenderSurface,
        warnings: list[str],
    ) -> Layout:
        px_per_cm = self._fit_scale(order.image, surface, warnings)
        pad = surface.padding_px
        picture = Rect(
            x=pad,
            y=pad,
            width=order.image.width * px_per_cm,
            height=order.image.height * px_per_cm,
        )
        labels = SizeLabels(
            image_size=order.image,
            visible_size=order.image,
            outside_size=order.image,
        )
        return Layout(
            canvas=Size2D(width=picture.width + 2 * pad, height=picture.height + 2 * pad),
            px_per_cm=px_per_cm,
            picture_box=picture,
            labels=labels,
            regions=(
                Region(
                    kind=RegionKind.PICTURE,
                    rect=picture,
                    fill=PICTURE_PLACEHOLDER_FILL,
                ),
            ),
            warnings=tuple(warnings),
        )

    @staticmethod
    def _fit_scale(
        extent_cm: Size2D,
        surface: RenderSurface,
        warnings: list[str],
    ) -> float:
        """Scale in px/cm, shrunk if the canvas would exceed the surface maximum."""
        px_per_cm = surface.px_per_cm
        available_w = surface.max_width_px - 2 * surface.padding_px
        available_h = surface.max_height_px - 2 * surface.padding_px
        needed_w = extent_cm.width * px_per_cm
        needed_h = extent_cm.height * px_per_cm
        if needed_w > available_w or needed_h > available_h:
            factor = min(available_w / needed_w, available_h / needed_h)
            px_per_cm *= factor
            message = (
                f"Canvas scaled down to {px_per_cm:.3f} px/cm to fit "
                f"{surface.max_width_px:g} x {surface.max_height_px:g} px"
            )
            logger.warning(message)
            warnings.append(message)
        return px_per_cm

    @staticmethod
    def _ring(inner: Rect, available_px: SideWidths, width: float) -> Rect:
        """Rectangle around ``inner`` grown by ``width`` but never past the mat."""
        return Rect(
            x=inner.x - min(width, available_px.left),
            y=inner.y - min(width, available_px.top),
            width=inner.width
            + min(width, available_px.left)
            + min(width, available_px.right),
            height=inner.height
            + min(width, available_px.top)
            + min(width, available_px.bottom),
        )

    @staticmethod
    def _labels(
        order: NormalizedOrder,
        outside: Size2D,
        warnings: list[str],
    ) -> SizeLabels:
        rebate = order.frame.rebate if order.frame else 0.0
        visible_w = order.image.width - 2 * rebate
        visible_h = order.image.height - 2 * rebate
        if visible_w < 0 or visible_h < 0:
            message = (
                f"Frame rebate {rebate:g} cm hides the whole image; "
                "visible size clamped to 0"
            )
            logger.warning(message)
            warnings.append(message)
        return SizeLabels(
            image_size=order.image,
            visible_size=Size2D(width=max(visible_w, 0.0), height=max(visible_h, 0.0)),
            outside_size=outside,
        )
