"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from framing.contracts.dtos import CompositionOutput
    from framing.domain import Layout

logger = logging.getLogger(__name__)


class UnsupportedFormatError(KeyError):
    """Raised when no exporter is registered for a format name."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"No exporter registered for format '{format_name}'. "
            f"Available formats: {', '.join(available) or 'none'}"
        )

    def __str__(self) -> str:
        # KeyError quotes its argument; show the plain message instead
        return str(self.args[0])


class ExportError(ValueError):
    """Raised when a composition cannot be exported."""


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters paint a composition's layout regions onto a concrete surface
    or serialize the composition. Each exporter defines its format name and
    file extension, and implements at least the export method.

    Attributes:
        format_name: Registry name for the export format (e.g., "svg", "dxf").
        file_extension: File extension without leading dot (e.g., "svg").
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

        Args:
            output: The composition to export.

        Returns:
            String representation of the exported data.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


def require_layout(output: CompositionOutput, format_name: str) -> Layout:
    """Return the composition's layout or raise ExportError."""
    if output.layout is None:
        raise ExportError(
            f"{format_name.upper()} export requires a computed layout"
            + (f": {'; '.join(output.errors)}" if output.errors else "")
        )
    return output.layout


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register
    decorator; importing ``framing.infrastructure.exporters`` registers the
    built-in formats.

    Example:
        @ExporterRegistry.register("svg")
        class SvgExporter:
            format_name = "svg"
            file_extension = "svg"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator to register an exporter class.

        Args:
            format_name: The format name to register (e.g., "svg").

        Returns:
            Decorator function that registers the class.
        """

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            UnsupportedFormatError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            raise UnsupportedFormatError(format_name, cls.available_formats())
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Clear all registered exporters.

        This is primarily useful for testing.
        """
        cls._exporters.clear()


class ExportManager:
    """Manages export operations to multiple formats.

    Coordinates exporting a composition to one or more formats, handling
    file naming and directory management.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the export manager.

        Args:
            output_dir: Directory where exported files will be saved.
                        Will be created if it doesn't exist.
        """
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: CompositionOutput,
        project_name: str = "frame",
    ) -> dict[str, Path]:
        """Export a composition to multiple formats.

        Every format is resolved before anything is written, so an unknown
        format name leaves no partial output behind.

        Args:
            formats: List of format names to export (e.g., ["svg", "json"]).
            output: The composition to export.
            project_name: Base name for output files (default "frame").

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            UnsupportedFormatError: If any format is not registered.
            ExportError: If the composition has no layout.
            OSError: If file operations fail.
        """
        exporter_classes = {name: ExporterRegistry.get(name) for name in formats}

        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter_class in exporter_classes.items():
            exporter = exporter_class()

            # Generate filename: {project_name}_{format}.{ext}
            filename = f"{project_name}_{format_name}.{exporter.file_extension}"
            filepath = self.output_dir / filename

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        output: CompositionOutput,
        project_name: str = "frame",
    ) -> Path:
        """Export a composition to a single format.

        Raises:
            UnsupportedFormatError: If the format is not registered.
            OSError: If file operations fail.
        """
        results = self.export_all([format_name], output, project_name)
        return results[format_name]
