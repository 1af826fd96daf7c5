"""Exporter protocol for render adapters.

An exporter is a render adapter: it takes a composition and paints its
layout regions, in order, onto a concrete surface (an SVG document, a DXF
drawing) or serializes it.
"""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from framing.contracts.dtos import CompositionOutput


@runtime_checkable
class ExporterProtocol(Protocol):
    """Base protocol for all exporters.

    Attributes:
        format_name: Registry name of the export format (e.g., "svg").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: CompositionOutput, path: Path) -> None:
        """Export a composition to a file.

        Args:
            output: The composition to export.
            path: Path where the file will be saved.
        """
        ...

    def export_string(self, output: CompositionOutput) -> str:
        """Export a composition as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


__all__ = ["ExporterProtocol"]
