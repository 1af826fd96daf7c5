"""Domain services for frame composition and pricing.

This package provides the pure computations of the framing engine:
- Unit conversion between display units and centimeters
- Shared order normalization and outside-size geometry
- Layout of the nested frame, mat and picture rectangles
- Itemized pricing
"""

from .geometry import (
    BORDER_BANDS,
    DEFAULT_IMAGE_HEIGHT_CM,
    DEFAULT_IMAGE_WIDTH_CM,
    BorderBand,
    NormalizedOrder,
    effective_outside_size,
    frame_border_thickness,
    normalize_order,
)
from .layout_engine import (
    BEVEL_SHADOW_PX,
    PICTURE_PLACEHOLDER_FILL,
    REVEAL_BORDER_PX,
    V_GROOVE_GAP_PX,
    LayoutEngine,
    RenderSurface,
)
from .pricing_engine import DEFAULT_RATES, PricingEngine, RateTable
from .unit_converter import UnitConverter, from_cm, to_cm

__all__ = [
    # Units
    "UnitConverter",
    "from_cm",
    "to_cm",
    # Shared geometry
    "BORDER_BANDS",
    "BorderBand",
    "DEFAULT_IMAGE_HEIGHT_CM",
    "DEFAULT_IMAGE_WIDTH_CM",
    "NormalizedOrder",
    "effective_outside_size",
    "frame_border_thickness",
    "normalize_order",
    # Layout
    "BEVEL_SHADOW_PX",
    "LayoutEngine",
    "PICTURE_PLACEHOLDER_FILL",
    "REVEAL_BORDER_PX",
    "RenderSurface",
    "V_GROOVE_GAP_PX",
    # Pricing
    "DEFAULT_RATES",
    "PricingEngine",
    "RateTable",
]
