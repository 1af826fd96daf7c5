"""Value objects for the framing domain.

This module provides immutable data types used throughout the framing
system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Units
from ._units import CM_PER_INCH, Length, LengthUnit

# Catalog records
from ._catalog import (
    FRAME_COLOR_HEX,
    MAT_CORE_HEX,
    FrameColor,
    FrameMaterial,
    FrameProfile,
    MatBoard,
    MatCore,
    StandardSize,
)

# Order options
from ._options import (
    BackingOption,
    ExtraOption,
    GlassOption,
    MatStyle,
    MatWidthMode,
    PrintOption,
)

# Geometry
from ._geometry import Rect, SideWidths, Size2D

# Layout output
from ._layout import Layout, Region, RegionKind, SizeLabels

# Pricing output
from ._pricing import ExtrasLine, LineItem, PriceBreakdown

__all__ = [
    "BackingOption",
    "CM_PER_INCH",
    "ExtraOption",
    "ExtrasLine",
    "FRAME_COLOR_HEX",
    "FrameColor",
    "FrameMaterial",
    "FrameProfile",
    "GlassOption",
    "Layout",
    "Length",
    "LengthUnit",
    "LineItem",
    "MAT_CORE_HEX",
    "MatBoard",
    "MatCore",
    "MatStyle",
    "MatWidthMode",
    "PriceBreakdown",
    "PrintOption",
    "Rect",
    "Region",
    "RegionKind",
    "SideWidths",
    "Size2D",
    "SizeLabels",
    "StandardSize",
]
