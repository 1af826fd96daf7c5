"""Layout output: ordered paint regions and derived size labels."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ._geometry import Rect, Size2D
from ._units import LengthUnit


class RegionKind(str, Enum):
    """What a painted region represents."""

    FRAME = "frame"
    BOTTOM_MAT = "bottom_mat"
    BOTTOM_MAT_REVEAL = "bottom_mat_reveal"
    TOP_MAT = "top_mat"
    MAT_REVEAL = "mat_reveal"
    BEVEL_SHADOW = "bevel_shadow"
    PICTURE = "picture"
    V_GROOVE = "v_groove"


@dataclass(frozen=True)
class Region:
    """A single rectangle to paint.

    Exactly one of ``fill`` or ``stroke`` is set. Filled regions are painted
    with a flat color; stroked regions are outlines of ``line_width``.
    """

    kind: RegionKind
    rect: Rect
    fill: str | None = None
    stroke: str | None = None
    line_width: float = 0.0
    opacity: float = 1.0

    def __post_init__(self) -> None:
        if (self.fill is None) == (self.stroke is None):
            raise ValueError("Region must have exactly one of fill or stroke")
        if self.stroke is not None and self.line_width <= 0:
            raise ValueError("Stroked region must have a positive line width")
        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError("Region opacity must be between 0 and 1")

    @property
    def is_stroke(self) -> bool:
        return self.stroke is not None


@dataclass(frozen=True)
class SizeLabels:
    """Customer-facing sizes, in cm.

    Attributes:
        image_size: The picture size as drawn.
        visible_size: Image area left visible once the frame rebate overlaps it.
        outside_size: External size of the framed composition.
    """

    image_size: Size2D
    visible_size: Size2D
    outside_size: Size2D

    def in_units(self, unit: LengthUnit) -> "SizeLabels":
        """Labels converted to a display unit."""
        if unit is LengthUnit.CM:
            return self
        from ..services.unit_converter import UnitConverter

        def convert(size: Size2D) -> Size2D:
            return Size2D(
                width=UnitConverter.from_cm(size.width, unit),
                height=UnitConverter.from_cm(size.height, unit),
            )

        return SizeLabels(
            image_size=convert(self.image_size),
            visible_size=convert(self.visible_size),
            outside_size=convert(self.outside_size),
        )


@dataclass(frozen=True)
class Layout:
    """Rectangle tree for one order configuration, in canvas pixels.

    ``regions`` is the paint order a render adapter must follow: frame, mat
    boxes (outermost first), reveal borders, picture, then the V-groove stroke.

    Attributes:
        canvas: Canvas size in px, including padding.
        px_per_cm: Scale actually used (may be below the requested scale when
            the canvas had to be shrunk to the renderable maximum).
        picture_box: Region occupied by the picture.
        mat_boxes: Mat boxes, innermost first (top mat, then bottom mat).
        outer_frame_box: Outer edge of the frame, or None without a frame.
        v_groove_box: Decorative groove outline, or None.
        frame_border: Rendered frame border thickness in cm.
        labels: Derived size labels in cm.
        regions: Ordered paint list.
        warnings: Non-fatal normalization notes.
    """

    canvas: Size2D
    px_per_cm: float
    picture_box: Rect
    mat_boxes: tuple[Rect, ...] = field(default_factory=tuple)
    outer_frame_box: Rect | None = None
    v_groove_box: Rect | None = None
    frame_border: float = 0.0
    labels: SizeLabels | None = None
    regions: tuple[Region, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_frame(self) -> bool:
        return self.outer_frame_box is not None

    def regions_of(self, kind: RegionKind) -> list[Region]:
        """All regions of a given kind, in paint order."""
        return [region for region in self.regions if region.kind is kind]
