"""Bundled catalog of frame profiles, mat boards and standard print sizes."""

from framing.application.catalog.manager import (
    CatalogEntryNotFoundError,
    CatalogManager,
)
from framing.application.catalog.schemas import (
    FrameProfileConfig,
    MatBoardConfig,
    StandardSizeConfig,
)

__all__ = [
    "CatalogEntryNotFoundError",
    "CatalogManager",
    "FrameProfileConfig",
    "MatBoardConfig",
    "StandardSizeConfig",
]
