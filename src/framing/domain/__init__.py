"""Domain layer - frame composition and pricing logic."""

from .entities import ImageSize, MatConfiguration, OrderConfiguration, SideLengths
from .services import (
    LayoutEngine,
    PricingEngine,
    RateTable,
    RenderSurface,
    UnitConverter,
    effective_outside_size,
    normalize_order,
)
from .value_objects import (
    BackingOption,
    ExtraOption,
    FrameMaterial,
    FrameProfile,
    GlassOption,
    Layout,
    Length,
    LengthUnit,
    LineItem,
    MatBoard,
    MatStyle,
    MatWidthMode,
    PriceBreakdown,
    PrintOption,
    Rect,
    Region,
    RegionKind,
    SideWidths,
    Size2D,
    SizeLabels,
    StandardSize,
)

__all__ = [
    "BackingOption",
    "ExtraOption",
    "FrameMaterial",
    "FrameProfile",
    "GlassOption",
    "ImageSize",
    "Layout",
    "LayoutEngine",
    "Length",
    "LengthUnit",
    "LineItem",
    "MatBoard",
    "MatConfiguration",
    "MatStyle",
    "MatWidthMode",
    "OrderConfiguration",
    "PriceBreakdown",
    "PricingEngine",
    "PrintOption",
    "RateTable",
    "Rect",
    "Region",
    "RegionKind",
    "RenderSurface",
    "SideLengths",
    "SideWidths",
    "Size2D",
    "SizeLabels",
    "StandardSize",
    "UnitConverter",
    "effective_outside_size",
    "normalize_order",
]
