"""Shared Data Transfer Objects for cross-layer communication.

The composition result is produced by the application layer and consumed by
the formatters and exporters in the infrastructure layer, so it lives here
to keep those layers independent of each other.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from framing.domain import Layout, OrderConfiguration, PriceBreakdown


@dataclass
class CompositionOutput:
    """Layout and price computed from one order configuration snapshot.

    Attributes:
        order: The configuration both results were computed from.
        layout: Nested rectangles and size labels.
        price: Itemized price breakdown.
        errors: Input errors that prevented composition.
        warnings: Non-fatal notes from normalization and layout.
    """

    order: OrderConfiguration | None
    layout: Layout | None
    price: PriceBreakdown | None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if composition succeeded without errors."""
        return len(self.errors) == 0 and self.layout is not None
