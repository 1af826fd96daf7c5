"""Length units and tagged length values."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class LengthUnit(str, Enum):
    """Physical length units accepted at the configuration boundary."""

    CM = "cm"
    INCH = "inch"


CM_PER_INCH = 2.54


@dataclass(frozen=True)
class Length:
    """A real length tagged with its unit.

    Non-positive values are representable on purpose: a half-typed image size
    must still reach the engines, which normalize it instead of failing.
    """

    value: float
    unit: LengthUnit = LengthUnit.CM

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(
                f"Length value must be a number, got {type(self.value).__name__}"
            )
        if not math.isfinite(self.value):
            raise ValueError("Length value must be finite")

    @classmethod
    def cm(cls, value: float) -> "Length":
        """Length in centimeters."""
        return cls(value=value, unit=LengthUnit.CM)

    @classmethod
    def inches(cls, value: float) -> "Length":
        """Length in inches."""
        return cls(value=value, unit=LengthUnit.INCH)
