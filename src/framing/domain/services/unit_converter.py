"""Conversion between display units and the internal centimeter unit."""

from __future__ import annotations

from ..value_objects import CM_PER_INCH, Length, LengthUnit


class UnitConverter:
    """Converts lengths between centimeters and inches.

    All internal geometry is in centimeters. Units are a closed enum, so
    both conversions are total.
    """

    @staticmethod
    def to_cm(value: float, unit: LengthUnit) -> float:
        """Convert a value in ``unit`` to centimeters."""
        if unit is LengthUnit.INCH:
            return value * CM_PER_INCH
        return float(value)

    @staticmethod
    def from_cm(value: float, unit: LengthUnit) -> float:
        """Convert a centimeter value to ``unit`` for display."""
        if unit is LengthUnit.INCH:
            return value / CM_PER_INCH
        return float(value)

    @classmethod
    def length_to_cm(cls, length: Length) -> float:
        return cls.to_cm(length.value, length.unit)


to_cm = UnitConverter.to_cm
from_cm = UnitConverter.from_cm
