"""Catalog entities: frame profiles and mat boards.

These records are owned by the catalog and referenced (never copied or
mutated) by an order configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FrameMaterial(str, Enum):
    """Frame moulding materials."""

    WOOD = "Wood"
    ALUMINIUM = "Aluminium"
    THREE_D = "3D"
    FLOATING = "Floating"


class FrameColor(str, Enum):
    """Catalog finishes for frame mouldings."""

    BLACK = "Black"
    WHITE = "White"
    RAW_OAK = "Raw Oak"
    OAK = "Oak"
    BLACK_GRAIN = "Black Grain"
    WHITE_GRAIN = "White Grain"
    SILVER = "Silver"
    GOLD = "Gold"
    ANTIQUE_GOLD = "Antique Gold"
    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"


# Flat fill color for each finish. Every FrameColor member must appear here;
# the check at import time keeps a new finish from silently rendering with a
# fallback color.
FRAME_COLOR_HEX: dict[FrameColor, str] = {
    FrameColor.BLACK: "#2c2c2c",
    FrameColor.WHITE: "#f8f8f8",
    FrameColor.RAW_OAK: "#d4a574",
    FrameColor.OAK: "#c19a6b",
    FrameColor.BLACK_GRAIN: "#3c3c3c",
    FrameColor.WHITE_GRAIN: "#f0f0f0",
    FrameColor.SILVER: "#c0c0c0",
    FrameColor.GOLD: "#daa520",
    FrameColor.ANTIQUE_GOLD: "#b8860b",
    FrameColor.RED: "#dc2626",
    FrameColor.BLUE: "#2563eb",
    FrameColor.GREEN: "#16a34a",
}

_missing_colors = set(FrameColor) - set(FRAME_COLOR_HEX)
if _missing_colors:
    raise RuntimeError(f"FRAME_COLOR_HEX is missing entries for {_missing_colors}")


class MatCore(str, Enum):
    """Mat board core categories.

    The core is what shows in a bevel or V-groove cut.
    """

    WHITE_CORE = "white-core"
    BLACK_CORE = "black-core"
    MUSEUM = "museum"


MAT_CORE_HEX: dict[MatCore, str] = {
    MatCore.WHITE_CORE: "#ffffff",
    MatCore.BLACK_CORE: "#1a1a1a",
    MatCore.MUSEUM: "#f5f1e6",
}


@dataclass(frozen=True)
class FrameProfile:
    """A frame moulding from the catalog.

    Attributes:
        id: Catalog identifier.
        code: Shop code printed on the moulding.
        width: Face width in cm.
        depth: Depth in cm (only used by 3D/cosmetic rendering).
        rebate: Lip overlap in cm that hides the edge of the picture.
        material: Moulding material.
        color: Finish.
        price_rate_per_meter: Price per meter of moulding.
        name: Display name.
        categories: Catalog browsing categories.
    """

    id: str
    code: str
    width: float
    depth: float
    rebate: float
    material: FrameMaterial
    color: FrameColor
    price_rate_per_meter: float
    name: str = ""
    categories: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.width < 0 or self.depth < 0 or self.rebate < 0:
            raise ValueError("Frame width, depth and rebate must be non-negative")
        if self.price_rate_per_meter < 0:
            raise ValueError("Frame price rate must be non-negative")

    @property
    def fill_color(self) -> str:
        """Hex fill color for the frame's finish."""
        return FRAME_COLOR_HEX[self.color]

    @property
    def is_floating(self) -> bool:
        return self.material is FrameMaterial.FLOATING


@dataclass(frozen=True)
class MatBoard:
    """A mat board from the catalog."""

    id: str
    name: str
    color: str
    core: MatCore = MatCore.WHITE_CORE

    def __post_init__(self) -> None:
        if not self.color.startswith("#") or len(self.color) not in (4, 7):
            raise ValueError(f"Mat board color must be a hex color, got {self.color!r}")

    @property
    def core_color(self) -> str:
        """Hex color of the board's core."""
        return MAT_CORE_HEX[self.core]


@dataclass(frozen=True)
class StandardSize:
    """A standard print size preset, stored in cm."""

    name: str
    label: str
    width: float
    height: float
    width_inch: float
    height_inch: float
