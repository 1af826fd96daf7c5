"""Pydantic models for catalog records.

Bundled catalog entries and inline frame/mat records in an order document
share these schemas.
"""

from pydantic import BaseModel, ConfigDict, Field

from framing.domain.value_objects import (
    FrameColor,
    FrameMaterial,
    FrameProfile,
    MatBoard,
    MatCore,
    StandardSize,
)

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"


class FrameProfileConfig(BaseModel):
    """Inline frame profile record (same shape as catalog entries)."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    code: str = ""
    name: str = ""
    width: float = Field(..., ge=0.0, allow_inf_nan=False)
    depth: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)
    rebate: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)
    material: FrameMaterial = FrameMaterial.WOOD
    color: FrameColor = FrameColor.BLACK
    price_rate_per_meter: float = Field(..., ge=0.0, allow_inf_nan=False)
    categories: list[str] = Field(default_factory=list)

    def to_profile(self) -> FrameProfile:
        """Convert to the domain frame profile."""
        return FrameProfile(
            id=self.id,
            code=self.code or self.id,
            name=self.name or self.code or self.id,
            width=self.width,
            depth=self.depth,
            rebate=self.rebate,
            material=self.material,
            color=self.color,
            price_rate_per_meter=self.price_rate_per_meter,
            categories=tuple(self.categories),
        )


class MatBoardConfig(BaseModel):
    """Inline mat board record (same shape as catalog entries)."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = ""
    color: str = Field(..., pattern=HEX_COLOR_PATTERN)
    core: MatCore = MatCore.WHITE_CORE

    def to_board(self) -> MatBoard:
        """Convert to the domain mat board."""
        return MatBoard(
            id=self.id,
            name=self.name or self.id,
            color=self.color.lower(),
            core=self.core,
        )


class StandardSizeConfig(BaseModel):
    """Standard print size record, used by the bundled catalog."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    label: str
    width: float = Field(..., gt=0.0)
    height: float = Field(..., gt=0.0)
    width_inch: float = Field(..., gt=0.0)
    height_inch: float = Field(..., gt=0.0)

    def to_size(self) -> StandardSize:
        """Convert to the domain standard size."""
        return StandardSize(
            name=self.name,
            label=self.label,
            width=self.width,
            height=self.height,
            width_inch=self.width_inch,
            height_inch=self.height_inch,
        )


