"""Planar geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Size2D:
    """Width/height pair. Unit depends on context (cm for labels, px for canvas)."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    @property
    def min_dimension(self) -> float:
        return min(self.width, self.height)

    def scaled(self, factor: float) -> "Size2D":
        return Size2D(width=self.width * factor, height=self.height * factor)


@dataclass(frozen=True)
class SideWidths:
    """Per-side widths of a surround, in cm."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @classmethod
    def uniform(cls, width: float) -> "SideWidths":
        return cls(top=width, bottom=width, left=width, right=width)

    @property
    def horizontal(self) -> float:
        """Combined left + right width."""
        return self.left + self.right

    @property
    def vertical(self) -> float:
        """Combined top + bottom width."""
        return self.top + self.bottom

    @property
    def maximum(self) -> float:
        return max(self.top, self.bottom, self.left, self.right)

    def clamped(self) -> "SideWidths":
        """Copy with negative sides clamped to zero."""
        return SideWidths(
            top=max(self.top, 0.0),
            bottom=max(self.bottom, 0.0),
            left=max(self.left, 0.0),
            right=max(self.right, 0.0),
        )

    def scaled(self, factor: float) -> "SideWidths":
        return SideWidths(
            top=self.top * factor,
            bottom=self.bottom * factor,
            left=self.left * factor,
            right=self.right * factor,
        )


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle. Origin is the top-left corner, y grows downward."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def size(self) -> Size2D:
        return Size2D(width=self.width, height=self.height)

    def inflate(self, amount: float) -> "Rect":
        """Grow the rectangle by the same amount on every side."""
        return Rect(
            x=self.x - amount,
            y=self.y - amount,
            width=self.width + 2 * amount,
            height=self.height + 2 * amount,
        )

    def inflate_sides(self, sides: SideWidths) -> "Rect":
        """Grow the rectangle by independent amounts per side."""
        return Rect(
            x=self.x - sides.left,
            y=self.y - sides.top,
            width=self.width + sides.horizontal,
            height=self.height + sides.vertical,
        )

    def contains(self, other: "Rect", tolerance: float = 1e-9) -> bool:
        """True if ``other`` lies entirely inside this rectangle."""
        return (
            other.x >= self.x - tolerance
            and other.y >= self.y - tolerance
            and other.right <= self.right + tolerance
            and other.bottom <= self.bottom + tolerance
        )
