"""Contracts module - protocols and shared DTOs for cross-layer communication.

This module provides:
- Protocol definitions for the layout and pricing engines
- Protocol definitions for render adapters (exporters) and formatters
- The composition output DTO shared by the application and infrastructure layers

Example:
    ```python
    from framing.contracts import CompositionOutput, LayoutEngineProtocol

    def preview(engine: LayoutEngineProtocol, output: CompositionOutput) -> None:
        ...
    ```
"""

# DTOs
from .dtos import CompositionOutput as CompositionOutput

# Exporter protocols
from .exporters import ExporterProtocol as ExporterProtocol

# Formatter protocols
from .formatters import (
    LayoutSummaryFormatterProtocol as LayoutSummaryFormatterProtocol,
    PriceFormatterProtocol as PriceFormatterProtocol,
)

# Service protocols
from .protocols import (
    LayoutEngineProtocol as LayoutEngineProtocol,
    PricingEngineProtocol as PricingEngineProtocol,
)
