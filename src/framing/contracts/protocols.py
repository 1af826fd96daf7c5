"""Service protocols for the framing engines.

Callers such as the compose command depend on these protocols instead of
the concrete engines, so alternative implementations (for example a cached
engine) can be injected through the service factory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from framing.domain import Layout, OrderConfiguration, PriceBreakdown, RenderSurface


class LayoutEngineProtocol(Protocol):
    """Protocol for layout computation.

    Example:
        ```python
        class CachedLayoutEngine:
            def compute_layout(self, config, surface=None) -> Layout:
                ...
        ```
    """

    def compute_layout(
        self,
        config: OrderConfiguration,
        surface: RenderSurface | None = None,
    ) -> Layout:
        """Compute the nested rectangles for an order.

        Args:
            config: Order configuration snapshot.
            surface: Target drawing surface.

        Returns:
            The computed layout.
        """
        ...


class PricingEngineProtocol(Protocol):
    """Protocol for order pricing."""

    def compute_price(self, config: OrderConfiguration) -> PriceBreakdown:
        """Compute the itemized price of an order.

        Args:
            config: Order configuration snapshot.

        Returns:
            The price breakdown.
        """
        ...


__all__ = ["LayoutEngineProtocol", "PricingEngineProtocol"]
