"""Shared frame geometry used by both the layout and the pricing engine.

The layout engine and the pricing engine must agree on the mat allowance and
the outside size of the matted composition. Both read them from
:func:`normalize_order`, the single place where configuration lengths are
converted to centimeters and out-of-range values are normalized.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from ..entities import MatConfiguration, OrderConfiguration
from ..value_objects import FrameProfile, MatWidthMode, SideWidths, Size2D
from .unit_converter import UnitConverter

logger = logging.getLogger(__name__)


# Substituted for a non-positive image width/height so the preview stays drawable
DEFAULT_IMAGE_WIDTH_CM = 20.0
DEFAULT_IMAGE_HEIGHT_CM = 30.0


@dataclass(frozen=True)
class BorderBand:
    """One row of the frame border lookup table.

    Applies to ``lower <= min_dimension < upper``. A ``fixed`` thickness of
    None means the border is proportional to the catalog face width.
    """

    lower: float
    upper: float
    fixed: float | None


# Empirical table tuned to match the shop's reference renderings.
BORDER_BANDS: tuple[BorderBand, ...] = (
    BorderBand(lower=0.0, upper=20.0, fixed=1.5),
    BorderBand(lower=20.0, upper=50.0, fixed=None),
    BorderBand(lower=50.0, upper=85.0, fixed=1.5),
    BorderBand(lower=85.0, upper=math.inf, fixed=1.5),
)
PROPORTIONAL_REFERENCE_CM = 15.0
MIN_PROPORTIONAL_BORDER_CM = 1.0
FLOATING_BORDER_FACTOR = 0.5
# Past a band edge the border may shrink by at most this much per cm of
# min_dimension, so the outside size keeps growing with the image
BORDER_EDGE_TAPER = 0.25


def _band_thickness(band: BorderBand, frame: FrameProfile, min_dimension: float) -> float:
    if band.fixed is not None:
        return band.fixed
    return max(
        frame.width * PROPORTIONAL_REFERENCE_CM / min_dimension,
        MIN_PROPORTIONAL_BORDER_CM,
    )


def frame_border_thickness(frame: FrameProfile, min_dimension: float) -> float:
    """Rendered frame border thickness in cm.

    The band table gives the border for ``min_dimension``. Where a band
    starts thinner than the previous one ends (a thin-faced frame crossing
    20 cm), the border tapers down from the previous value instead of
    stepping down.

    Args:
        frame: Selected frame profile.
        min_dimension: Smaller side of the matted composition in cm.

    Returns:
        Border thickness in cm, halved for floating frames.
    """
    thickness = BORDER_BANDS[-1].fixed or 0.0
    for index, band in enumerate(BORDER_BANDS):
        if band.lower <= min_dimension < band.upper:
            thickness = _band_thickness(band, frame, min_dimension)
            if index > 0:
                edge = band.lower
                previous = _band_thickness(BORDER_BANDS[index - 1], frame, edge)
                tapered = previous - (min_dimension - edge) * BORDER_EDGE_TAPER
                thickness = max(thickness, tapered)
            break

    if frame.is_floating:
        thickness *= FLOATING_BORDER_FACTOR
    return thickness


@dataclass(frozen=True)
class NormalizedOrder:
    """An order configuration with every length in cm and every value in range.

    Attributes:
        image: Picture size in cm (default substituted if the input was not
            positive).
        image_is_valid: False when the default image size had to be used.
        frame: Selected frame, if any.
        mat_sides: Top mat width on each side (all zero without an active mat).
        bottom_reveal: Bottom mat reveal on each side after capping (all zero
            unless a double mat is active).
        requested_bottom_width: Bottom mat reveal as entered, in cm.
        mat_active: Whether a mat contributes geometry and cost.
        mat_double: Whether a bottom mat contributes geometry.
        v_groove: Whether a groove is cut (only meaningful with a mat).
        warnings: Normalization notes.
    """

    image: Size2D
    image_is_valid: bool
    frame: FrameProfile | None
    mat_sides: SideWidths
    bottom_reveal: SideWidths
    requested_bottom_width: float
    mat_active: bool
    mat_double: bool
    v_groove: bool
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def effective_mat_width(self) -> float:
        """Mat width used for border scaling: the widest side in custom mode."""
        return self.mat_sides.maximum

    @property
    def matted_size(self) -> Size2D:
        """Outside size of the picture plus all mat boards, in cm."""
        return Size2D(
            width=self.image.width
            + self.mat_sides.horizontal
            + self.bottom_reveal.horizontal,
            height=self.image.height
            + self.mat_sides.vertical
            + self.bottom_reveal.vertical,
        )

    @property
    def border_min_dimension(self) -> float:
        """Dimension that selects the frame border band."""
        return self.image.min_dimension + 2 * self.effective_mat_width

    @property
    def frame_border(self) -> float:
        """Rendered frame border in cm (0 without a frame)."""
        if self.frame is None:
            return 0.0
        return frame_border_thickness(self.frame, self.border_min_dimension)

    @property
    def outside_size(self) -> Size2D:
        """Outside size including the rendered frame border, in cm."""
        matted = self.matted_size
        border = self.frame_border
        return Size2D(width=matted.width + 2 * border, height=matted.height + 2 * border)


def _mat_sides(mat: MatConfiguration) -> SideWidths:
    if mat.width_mode is MatWidthMode.UNIFORM:
        return SideWidths.uniform(UnitConverter.length_to_cm(mat.uniform_width))
    widths = mat.custom_widths
    return SideWidths(
        top=UnitConverter.length_to_cm(widths.top),
        bottom=UnitConverter.length_to_cm(widths.bottom),
        left=UnitConverter.length_to_cm(widths.left),
        right=UnitConverter.length_to_cm(widths.right),
    )


def normalize_order(config: OrderConfiguration) -> NormalizedOrder:
    """Convert an order to centimeters and normalize out-of-range values.

    Never raises for numeric input: non-positive image sizes fall back to
    the default size and negative mat widths are clamped to zero.

    Args:
        config: The order configuration snapshot.

    Returns:
        The normalized order.
    """
    warnings: list[str] = []

    width = UnitConverter.length_to_cm(config.image_size.width)
    height = UnitConverter.length_to_cm(config.image_size.height)
    image_is_valid = width > 0 and height > 0
    if width <= 0:
        warnings.append(
            f"Image width {width:g} cm is not positive; using {DEFAULT_IMAGE_WIDTH_CM:g} cm"
        )
        width = DEFAULT_IMAGE_WIDTH_CM
    if height <= 0:
        warnings.append(
            f"Image height {height:g} cm is not positive; using {DEFAULT_IMAGE_HEIGHT_CM:g} cm"
        )
        height = DEFAULT_IMAGE_HEIGHT_CM
    image = Size2D(width=width, height=height)

    mat = config.mat
    mat_sides = SideWidths()
    bottom_reveal = SideWidths()
    requested_bottom = 0.0
    if mat.is_active:
        raw_sides = _mat_sides(mat)
        mat_sides = raw_sides.clamped()
        if mat_sides != raw_sides:
            warnings.append("Negative mat widths were clamped to 0 cm")
        if mat.is_double:
            requested_bottom = max(UnitConverter.length_to_cm(mat.bottom_width), 0.0)
            cap_x = min(requested_bottom, image.width / 2)
            cap_y = min(requested_bottom, image.height / 2)
            if cap_x < requested_bottom or cap_y < requested_bottom:
                warnings.append(
                    f"Bottom mat reveal {requested_bottom:g} cm capped to half the picture size"
                )
            bottom_reveal = SideWidths(top=cap_y, bottom=cap_y, left=cap_x, right=cap_x)

    for warning in warnings:
        logger.warning(warning)

    return NormalizedOrder(
        image=image,
        image_is_valid=image_is_valid,
        frame=config.frame,
        mat_sides=mat_sides,
        bottom_reveal=bottom_reveal,
        requested_bottom_width=requested_bottom,
        mat_active=mat.is_active,
        mat_double=mat.is_double,
        v_groove=mat.v_groove and mat.is_active,
        warnings=tuple(warnings),
    )


def effective_outside_size(config: OrderConfiguration) -> Size2D:
    """Outside size of the matted composition in cm.

    This is the size the pricing engine charges moulding, glass and backing
    for, and the size the layout engine wraps the frame border around.
    """
    return normalize_order(config).matted_size
