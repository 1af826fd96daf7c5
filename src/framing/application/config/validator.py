"""Validation structures and framing advisory checks.

Schema validation (types, enums, unknown keys) already happened in pydantic.
The checks here look at the configuration as a whole and report problems
the engines would silently normalize, so the customer can fix them.
"""

from dataclasses import dataclass, field
from typing import Any

from framing.application.catalog import CatalogManager
from framing.application.config.adapter import (
    config_to_image_size,
    config_to_length,
    resolve_frame,
    resolve_mat_board,
)
from framing.application.config.loader import ConfigError
from framing.application.config.schemas import FramingConfiguration
from framing.domain.services import UnitConverter
from framing.domain.value_objects import FrameProfile, MatStyle, MatWidthMode


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "mat.top_board").
        message: Human-readable description of the error.
        value: The invalid value that caused the error.
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field.
        message: Human-readable description of the concern.
        suggestion: Optional suggested remediation.
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def _record_catalog_error(result: ValidationResult, error: ConfigError) -> None:
    for detail in error.details:
        result.add_error(detail["path"], detail["message"], detail.get("value"))


def _mat_side_widths_cm(config: FramingConfiguration) -> dict[str, float]:
    mat = config.mat
    if mat.width_mode is MatWidthMode.UNIFORM:
        width = UnitConverter.length_to_cm(config_to_length(mat.uniform_width, config.units))
        return {"top": width, "bottom": width, "left": width, "right": width}
    widths = mat.custom_widths
    return {
        side: UnitConverter.length_to_cm(config_to_length(getattr(widths, side), config.units))
        for side in ("top", "bottom", "left", "right")
    }


def check_mat_advisories(config: FramingConfiguration) -> ValidationResult:
    """Check the mat selection for settings the engines would ignore or clamp.

    Advisories checked:
    - Mat style set without a board (no mat is produced)
    - Double style without a bottom board (treated as single)
    - Bottom board given for a single mat (ignored)
    - V-groove without an active mat (groove skipped)
    - Negative mat widths (clamped to zero)
    - Bottom mat reveal not smaller than the top mat width
    """
    result = ValidationResult()
    mat = config.mat

    if mat.style is MatStyle.NONE:
        if mat.v_groove:
            result.add_warning(
                path="mat.v_groove",
                message="V-groove requested but no mat is selected; the groove is skipped",
                suggestion="Select a single or double mat, or turn off the V-groove",
            )
        return result

    if mat.top_board is None:
        result.add_warning(
            path="mat.top_board",
            message=f"Mat style '{mat.style.value}' has no board selected; no mat will be produced",
            suggestion="Choose a mat board from the catalog",
        )
        if mat.v_groove:
            result.add_warning(
                path="mat.v_groove",
                message="V-groove requested but the mat is not active; the groove is skipped",
            )
        return result

    if mat.style is MatStyle.DOUBLE and mat.bottom_board is None:
        result.add_warning(
            path="mat.bottom_board",
            message="Double mat has no bottom board; it will be priced and drawn as a single mat",
            suggestion="Choose a bottom mat board",
        )
    if mat.style is MatStyle.SINGLE and mat.bottom_board is not None:
        result.add_warning(
            path="mat.bottom_board",
            message="Bottom board is ignored for a single mat",
        )

    sides = _mat_side_widths_cm(config)
    negative = [side for side, width in sides.items() if width < 0]
    if negative:
        result.add_warning(
            path="mat.custom_widths" if mat.width_mode is MatWidthMode.CUSTOM else "mat.uniform_width",
            message=f"Negative mat width on {', '.join(negative)} will be clamped to 0",
        )

    if mat.style is MatStyle.DOUBLE and mat.bottom_board is not None:
        bottom = UnitConverter.length_to_cm(config_to_length(mat.bottom_width, config.units))
        narrowest_top = min(sides.values())
        if bottom >= narrowest_top > 0:
            result.add_warning(
                path="mat.bottom_width",
                message=(
                    f"Bottom mat reveal of {bottom:.2f} cm is not smaller than the "
                    f"top mat width of {narrowest_top:.2f} cm"
                ),
                suggestion="A bottom mat reveal is usually 0.3 to 1 cm",
            )
    return result


def check_image_advisories(
    config: FramingConfiguration,
    catalog: CatalogManager,
    frame: FrameProfile | None,
) -> ValidationResult:
    """Check the image size against defaults and the frame rebate."""
    result = ValidationResult()
    try:
        image = config_to_image_size(config, catalog)
    except ConfigError as e:
        _record_catalog_error(result, e)
        return result

    width = UnitConverter.length_to_cm(image.width)
    height = UnitConverter.length_to_cm(image.height)
    if width <= 0 or height <= 0:
        result.add_warning(
            path="image",
            message="Image size is not positive; a default size will be drawn and the price will be zero",
            suggestion="Enter the picture width and height",
        )
        return result

    if frame is not None and 2 * frame.rebate >= min(width, height):
        result.add_warning(
            path="frame",
            message=(
                f"Frame rebate of {frame.rebate:g} cm on each side hides the whole "
                f"{width:g} x {height:g} cm image"
            ),
            suggestion="Use a larger image or a frame with a smaller rebate",
        )
    return result


def validate_config(
    config: FramingConfiguration,
    catalog: CatalogManager | None = None,
) -> ValidationResult:
    """Perform full validation of a framing configuration.

    Unknown catalog ids are errors; everything else is advisory.

    Args:
        config: A FramingConfiguration instance (already validated by pydantic).
        catalog: Catalog used to resolve ids (defaults to the bundled catalog).

    Returns:
        ValidationResult containing any errors or warnings.
    """
    catalog = catalog or CatalogManager()
    result = ValidationResult()

    frame: FrameProfile | None = None
    try:
        frame = resolve_frame(config.frame, catalog)
    except ConfigError as e:
        _record_catalog_error(result, e)

    for path, ref in (
        ("mat.top_board", config.mat.top_board),
        ("mat.bottom_board", config.mat.bottom_board),
    ):
        try:
            resolve_mat_board(ref, catalog, path)
        except ConfigError as e:
            _record_catalog_error(result, e)

    if config.frame is None:
        result.add_warning(
            path="frame",
            message="No frame selected; only the picture will be drawn and the price will be zero",
            suggestion="Choose a frame from the catalog",
        )

    result.merge(check_image_advisories(config, catalog, frame))
    result.merge(check_mat_advisories(config))
    return result
