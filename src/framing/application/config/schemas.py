"""Pydantic models for framing order configuration documents.

This is the single boundary where type-invalid input (non-numeric dimensions,
unknown enum values, unexpected keys) is rejected. Out-of-range numbers such
as a zero image width are accepted here; the engines normalize them.
"""

from typing import Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from framing.application.catalog.schemas import FrameProfileConfig, MatBoardConfig

# Domain enums use (str, Enum) so they validate directly from JSON strings
from framing.domain.value_objects import (
    BackingOption,
    ExtraOption,
    GlassOption,
    LengthUnit,
    MatStyle,
    MatWidthMode,
    PrintOption,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema with image, frame, mat, glazing and extras
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class LengthConfig(BaseModel):
    """A length with an explicit unit.

    Attributes:
        value: Numeric value (may be zero or negative; see module docstring).
        unit: Unit of the value. Defaults to the document's ``units``.
    """

    model_config = ConfigDict(extra="forbid")

    value: float = Field(..., allow_inf_nan=False)
    unit: LengthUnit | None = None


# A bare number is interpreted in the document's units
LengthInput = LengthConfig | Annotated[float, Field(allow_inf_nan=False)]


class ImageConfig(BaseModel):
    """Picture content size.

    Either both ``width`` and ``height`` are given, or ``standard_size`` names a
    catalog preset (for example ``"8x10"`` or ``"A4"``).
    """

    model_config = ConfigDict(extra="forbid")

    width: LengthInput | None = None
    height: LengthInput | None = None
    standard_size: str | None = None

    @model_validator(mode="after")
    def validate_size_source(self) -> "ImageConfig":
        """Require exactly one way of specifying the size."""
        explicit = self.width is not None or self.height is not None
        if explicit and self.standard_size is not None:
            raise ValueError(
                "Specify either 'width'/'height' or 'standard_size', not both"
            )
        if not explicit and self.standard_size is None:
            raise ValueError("Specify 'width' and 'height' or a 'standard_size'")
        if explicit and (self.width is None or self.height is None):
            raise ValueError("Both 'width' and 'height' are required")
        return self


class CustomWidthsConfig(BaseModel):
    """Per-side mat widths for custom width mode."""

    model_config = ConfigDict(extra="forbid")

    top: LengthInput = 5.0
    bottom: LengthInput = 5.0
    left: LengthInput = 5.0
    right: LengthInput = 5.0


class MatConfig(BaseModel):
    """Mat selection.

    Attributes:
        style: none, single or double.
        width_mode: uniform or custom.
        uniform_width: Width on all sides in uniform mode.
        custom_widths: Per-side widths in custom mode.
        top_board: Catalog id or inline record of the top mat board.
        bottom_board: Catalog id or inline record of the bottom mat board.
        bottom_width: Reveal of the bottom mat beyond the top mat.
        v_groove: Cut a decorative groove into the mat.
    """

    model_config = ConfigDict(extra="forbid")

    style: MatStyle = MatStyle.NONE
    width_mode: MatWidthMode = MatWidthMode.UNIFORM
    uniform_width: LengthInput = 5.0
    custom_widths: CustomWidthsConfig = Field(default_factory=CustomWidthsConfig)
    top_board: str | MatBoardConfig | None = None
    bottom_board: str | MatBoardConfig | None = None
    bottom_width: LengthInput = 0.5
    v_groove: bool = False


class SurfaceConfig(BaseModel):
    """Rendering surface used for layout and drawing exports."""

    model_config = ConfigDict(extra="forbid")

    padding_px: float = Field(default=40.0, ge=0.0, allow_inf_nan=False)
    px_per_cm: float = Field(default=10.0, gt=0.0, allow_inf_nan=False)
    max_width_px: float = Field(default=1500.0, gt=0.0, allow_inf_nan=False)
    max_height_px: float = Field(default=2000.0, gt=0.0, allow_inf_nan=False)

    @model_validator(mode="after")
    def validate_padding_fits(self) -> "SurfaceConfig":
        """Ensure padding leaves room for a drawing."""
        if (
            self.max_width_px <= 2 * self.padding_px
            or self.max_height_px <= 2 * self.padding_px
        ):
            raise ValueError("Maximum canvas size must exceed twice the padding")
        return self


class OutputConfig(BaseModel):
    """Output file configuration.

    Attributes:
        formats: Export format names (e.g. "svg", "dxf", "json").
        output_dir: Directory for exported files.
        project_name: Base name of exported files.
    """

    model_config = ConfigDict(extra="forbid")

    formats: list[str] = Field(default_factory=list)
    output_dir: str | None = None
    project_name: str = Field(default="frame", min_length=1)

    @field_validator("formats")
    @classmethod
    def normalize_formats(cls, v: list[str]) -> list[str]:
        """Lower-case format names and drop duplicates, keeping order."""
        seen: list[str] = []
        for name in v:
            key = name.strip().lower()
            if key and key not in seen:
                seen.append(key)
        return seen


class FramingConfiguration(BaseModel):
    """Root configuration model for a framing order.

    Example:
        >>> config = FramingConfiguration(
        ...     schema_version="1.0",
        ...     image=ImageConfig(width=20, height=30),
        ...     frame="103F",
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    units: LengthUnit = LengthUnit.CM
    image: ImageConfig
    frame: str | FrameProfileConfig | None = None
    mat: MatConfig = Field(default_factory=MatConfig)
    glass: GlassOption = GlassOption.CLEAR
    backing: BackingOption = BackingOption.STANDARD
    extras: list[ExtraOption] = Field(default_factory=list)
    print_option: PrintOption | None = None
    quantity: int = Field(default=1, ge=1, le=10000)
    surface: SurfaceConfig = Field(default_factory=SurfaceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

