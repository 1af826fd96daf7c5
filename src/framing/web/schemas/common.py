"""Common Pydantic schemas shared across responses."""

from pydantic import BaseModel, Field


class SizeSchema(BaseModel):
    """Width/height pair (cm for labels, px for the canvas)."""

    width: float = Field(..., description="Width")
    height: float = Field(..., description="Height")


class RectSchema(BaseModel):
    """Axis-aligned rectangle in canvas pixels, origin top-left."""

    x: float = Field(..., description="Left edge in px")
    y: float = Field(..., description="Top edge in px")
    width: float = Field(..., description="Width in px")
    height: float = Field(..., description="Height in px")


class LineItemSchema(BaseModel):
    """One priced line of the breakdown."""

    basis: float = Field(..., description="Perimeter in cm or area in cm²")
    rate: float = Field(..., description="Price per unit of basis")
    total: float = Field(..., description="Cost for one framed piece")
