"""Order option enums: mat style, glazing, backing, extras, printing."""

from __future__ import annotations

from enum import Enum


class MatStyle(str, Enum):
    """Number of mat boards around the picture."""

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


class MatWidthMode(str, Enum):
    """How mat widths are specified.

    - UNIFORM: one width on all four sides
    - CUSTOM: independent top/bottom/left/right widths
    """

    UNIFORM = "uniform"
    CUSTOM = "custom"


class GlassOption(str, Enum):
    """Glazing choices."""

    CLEAR = "clear"
    UV = "uv"
    ANTI_GLARE = "anti-glare"
    MUSEUM = "museum"


class BackingOption(str, Enum):
    """Backing board choices."""

    STANDARD = "standard"
    FOAM = "foam"
    ARCHIVAL = "archival"
    CONSERVATION = "conservation"


class ExtraOption(str, Enum):
    """Flat-fee extras: shipping tiers, protection, personalization, services."""

    STANDARD_SHIPPING = "standard-shipping"
    EXPRESS_SHIPPING = "express-shipping"
    OVERNIGHT_SHIPPING = "overnight-shipping"
    FRAME_PROTECTION = "frame-protection"
    INSURANCE = "insurance"
    CUSTOM_PLAQUE = "custom-plaque"
    GIFT_WRAPPING = "gift-wrapping"
    GIFT_CARD = "gift-card"
    WHITE_GLOVE = "white-glove"
    INSTALLATION = "installation"


class PrintOption(str, Enum):
    """Print service quality tiers, priced per cm² of image area."""

    STANDARD = "standard"
    PREMIUM = "premium"
    PROFESSIONAL = "professional"
