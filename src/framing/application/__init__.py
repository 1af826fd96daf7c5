"""Application layer - use cases and orchestration."""

from .commands import ComposeFrameCommand
from .dtos import CompositionOutput
from .factory import ServiceFactory, get_factory, reset_factory, set_factory

__all__ = [
    "ComposeFrameCommand",
    "CompositionOutput",
    "ServiceFactory",
    "get_factory",
    "reset_factory",
    "set_factory",
]
