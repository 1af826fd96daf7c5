"""Catalog manager for the bundled frame, mat board and print size data.

The catalog is read-only package data. The engines never fetch from it;
callers resolve ids here and hand the resulting records to an order.
"""

import json
import logging
from functools import cached_property
from importlib import resources
from typing import Any

from framing.application.catalog.schemas import (
    FrameProfileConfig,
    MatBoardConfig,
    StandardSizeConfig,
)
from framing.domain.value_objects import (
    FrameMaterial,
    FrameProfile,
    MatBoard,
    StandardSize,
)

logger = logging.getLogger(__name__)


class CatalogEntryNotFoundError(Exception):
    """Raised when a requested catalog entry does not exist.

    Attributes:
        kind: Entry kind ("frame", "mat board" or "standard size").
        entry_id: The id that was looked up.
    """

    def __init__(self, kind: str, entry_id: str) -> None:
        self.kind = kind
        self.entry_id = entry_id
        super().__init__(f"Unknown {kind}: {entry_id}")


class CatalogManager:
    """Read-only access to the bundled catalog.

    Data files are parsed on first use and validated with the same record
    schemas that inline configuration entries use.

    Example:
        catalog = CatalogManager()
        frame = catalog.get_frame("103F")
        for board in catalog.list_mat_boards():
            print(board.id, board.name)
    """

    def __init__(self, data_package: str = "framing.application.catalog.data") -> None:
        self._data_package = data_package

    def _read(self, filename: str) -> list[dict[str, Any]]:
        data_files = resources.files(self._data_package)
        content = data_files.joinpath(filename).read_text(encoding="utf-8")
        records = json.loads(content)
        logger.debug(f"Loaded {len(records)} records from {filename}")
        return records

    @cached_property
    def _frames(self) -> dict[str, FrameProfile]:
        frames = (
            FrameProfileConfig.model_validate(record).to_profile()
            for record in self._read("frames.json")
        )
        return {frame.id: frame for frame in frames}

    @cached_property
    def _mat_boards(self) -> dict[str, MatBoard]:
        boards = (
            MatBoardConfig.model_validate(record).to_board()
            for record in self._read("mats.json")
        )
        return {board.id: board for board in boards}

    @cached_property
    def _sizes(self) -> dict[str, StandardSize]:
        sizes = (
            StandardSizeConfig.model_validate(record).to_size()
            for record in self._read("sizes.json")
        )
        return {size.name: size for size in sizes}

    def list_frames(
        self,
        material: FrameMaterial | None = None,
        category: str | None = None,
    ) -> list[FrameProfile]:
        """List frame profiles in catalog order.

        Args:
            material: Only frames of this material.
            category: Only frames in this browsing category (case-insensitive).

        Returns:
            Matching frame profiles.
        """
        frames = list(self._frames.values())
        if material is not None:
            frames = [frame for frame in frames if frame.material is material]
        if category is not None:
            wanted = category.lower()
            frames = [
                frame
                for frame in frames
                if any(c.lower() == wanted for c in frame.categories)
            ]
        return frames

    def list_mat_boards(self) -> list[MatBoard]:
        """List mat boards in catalog order."""
        return list(self._mat_boards.values())

    def list_standard_sizes(self) -> list[StandardSize]:
        """List standard print sizes, smallest first."""
        return list(self._sizes.values())

    def get_frame(self, frame_id: str) -> FrameProfile:
        """Look up a frame profile by id.

        Raises:
            CatalogEntryNotFoundError: If no frame has this id.
        """
        try:
            return self._frames[frame_id]
        except KeyError:
            raise CatalogEntryNotFoundError("frame", frame_id) from None

    def get_mat_board(self, board_id: str) -> MatBoard:
        """Look up a mat board by id.

        Raises:
            CatalogEntryNotFoundError: If no board has this id.
        """
        try:
            return self._mat_boards[board_id]
        except KeyError:
            raise CatalogEntryNotFoundError("mat board", board_id) from None

    def get_standard_size(self, name: str) -> StandardSize:
        """Look up a standard print size by name (e.g. "8x10", "A4").

        Raises:
            CatalogEntryNotFoundError: If no size has this name.
        """
        try:
            return self._sizes[name]
        except KeyError:
            raise CatalogEntryNotFoundError("standard size", name) from None

    def has_frame(self, frame_id: str) -> bool:
        return frame_id in self._frames

    def has_mat_board(self, board_id: str) -> bool:
        return board_id in self._mat_boards
