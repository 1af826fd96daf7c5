"""Price breakdown value objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from ._options import ExtraOption


@dataclass(frozen=True)
class LineItem:
    """One priced line.

    Attributes:
        basis: The measured quantity priced: perimeter in cm for the frame,
            area in cm² for sheet goods.
        rate: Price per unit of basis (per meter for the frame).
        total: Cost of the line for a single framed piece.
    """

    basis: float = 0.0
    rate: float = 0.0
    total: float = 0.0


@dataclass(frozen=True)
class ExtrasLine:
    """Selected flat-fee extras and their combined cost."""

    items: tuple[ExtraOption, ...] = field(default_factory=tuple)
    total: float = 0.0


@dataclass(frozen=True)
class PriceBreakdown:
    """Itemized price of an order.

    All values are unrounded floats. Line items, labor, subtotal and tax are
    per framed piece; ``total`` covers ``quantity`` pieces.
    """

    frame: LineItem = field(default_factory=LineItem)
    mat: LineItem = field(default_factory=LineItem)
    glass: LineItem = field(default_factory=LineItem)
    backing: LineItem = field(default_factory=LineItem)
    printing: LineItem = field(default_factory=LineItem)
    extras: ExtrasLine = field(default_factory=ExtrasLine)
    labor: float = 0.0
    subtotal: float = 0.0
    tax: float = 0.0
    total: float = 0.0
    quantity: int = 1

    @classmethod
    def zero(cls, quantity: int = 1) -> "PriceBreakdown":
        """All-zero breakdown for an order that cannot be priced yet."""
        return cls(quantity=quantity)

    @property
    def unit_total(self) -> float:
        """Price of a single framed piece including tax."""
        return self.subtotal + self.tax

    @property
    def is_zero(self) -> bool:
        return self.total == 0.0 and self.subtotal == 0.0
