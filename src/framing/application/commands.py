"""Application commands (use cases) for frame composition."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from framing.application.config import (
    FramingConfiguration,
    config_to_order,
    config_to_surface,
)
from framing.domain import LayoutEngine, OrderConfiguration, PricingEngine, RenderSurface

from .dtos import CompositionOutput

if TYPE_CHECKING:
    from framing.application.catalog import CatalogManager
    from framing.contracts.protocols import LayoutEngineProtocol, PricingEngineProtocol

logger = logging.getLogger(__name__)


class ComposeFrameCommand:
    """Command to lay out and price one framing order.

    Both engines read the same immutable order snapshot and take the matted
    size from one shared computation: pricing charges that size, layout
    wraps the frame border around it.
    """

    def __init__(
        self,
        layout_engine: LayoutEngineProtocol | None = None,
        pricing_engine: PricingEngineProtocol | None = None,
    ) -> None:
        self.layout_engine = layout_engine or LayoutEngine()
        self.pricing_engine = pricing_engine or PricingEngine()

    def execute(
        self,
        order: OrderConfiguration,
        surface: RenderSurface | None = None,
    ) -> CompositionOutput:
        """Compute layout and price for an order.

        Args:
            order: Order configuration snapshot.
            surface: Drawing surface for the layout.

        Returns:
            CompositionOutput with the layout, price and any warnings.
        """
        layout = self.layout_engine.compute_layout(order, surface)
        price = self.pricing_engine.compute_price(order)
        logger.info(
            f"Composed order: outside {layout.labels.outside_size.width:.2f} x "
            f"{layout.labels.outside_size.height:.2f} cm, total {price.total:.2f}"
        )
        return CompositionOutput(
            order=order,
            layout=layout,
            price=price,
            warnings=list(layout.warnings),
        )

    def execute_config(
        self,
        config: FramingConfiguration,
        catalog: CatalogManager | None = None,
    ) -> CompositionOutput:
        """Convert a validated configuration document and compose it.

        Raises:
            ConfigError: If a referenced catalog entry does not exist.
        """
        order = config_to_order(config, catalog)
        return self.execute(order, config_to_surface(config))
