"""Formatter protocols for human-readable output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from framing.domain import Layout, LengthUnit, PriceBreakdown


class PriceFormatterProtocol(Protocol):
    """Protocol for price breakdown formatting.

    Implementations round to cents for display only; the breakdown itself
    stays unrounded.
    """

    def format(self, price: PriceBreakdown) -> str:
        """Format a price breakdown as a table."""
        ...


class LayoutSummaryFormatterProtocol(Protocol):
    """Protocol for layout summary formatting."""

    def format(self, layout: Layout, unit: LengthUnit) -> str:
        """Format the layout size labels and boxes in a display unit."""
        ...


__all__ = ["LayoutSummaryFormatterProtocol", "PriceFormatterProtocol"]
