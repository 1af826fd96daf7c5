"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from framing.web.schemas.common import LineItemSchema, RectSchema, SizeSchema


class SizeLabelsSchema(BaseModel):
    """Customer-facing sizes in cm."""

    image_size: SizeSchema = Field(..., description="Picture size")
    visible_size: SizeSchema = Field(..., description="Image area left visible by the rebate")
    outside_size: SizeSchema = Field(..., description="Outside size of the framed piece")


class RegionSchema(BaseModel):
    """A rectangle to paint, in paint order."""

    kind: str = Field(..., description="Region kind (frame, top_mat, picture, ...)")
    rect: RectSchema
    fill: str | None = Field(default=None, description="Fill color")
    stroke: str | None = Field(default=None, description="Stroke color")
    line_width: float = Field(default=0.0, description="Stroke width in px")
    opacity: float = Field(default=1.0, description="Opacity 0-1")


class LayoutSchema(BaseModel):
    """Computed layout of an order."""

    canvas: SizeSchema = Field(..., description="Canvas size in px")
    px_per_cm: float = Field(..., description="Scale used")
    frame_border_cm: float = Field(..., description="Rendered frame border")
    picture_box: RectSchema
    mat_boxes: list[RectSchema] = Field(default_factory=list, description="Innermost first")
    outer_frame_box: RectSchema | None = None
    v_groove_box: RectSchema | None = None
    labels_cm: SizeLabelsSchema | None = None
    regions: list[RegionSchema] = Field(default_factory=list, description="Paint order")
    warnings: list[str] = Field(default_factory=list)


class ExtrasSchema(BaseModel):
    """Selected extras and their combined fee."""

    items: list[str] = Field(default_factory=list)
    total: float = 0.0


class PriceBreakdownSchema(BaseModel):
    """Itemized, unrounded price of an order."""

    frame: LineItemSchema
    mat: LineItemSchema
    glass: LineItemSchema
    backing: LineItemSchema
    printing: LineItemSchema
    extras: ExtrasSchema
    labor: float
    subtotal: float = Field(..., description="Per piece, before tax")
    tax: float = Field(..., description="Per piece")
    unit_total: float = Field(..., description="Per piece, including tax")
    quantity: int
    total: float = Field(..., description="All pieces, including tax")


class ComposeResponseSchema(BaseModel):
    """Response for a full composition."""

    is_valid: bool = Field(..., description="Whether composition succeeded")
    warnings: list[str] = Field(default_factory=list)
    layout: LayoutSchema
    price: PriceBreakdownSchema


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    exit_code: int = Field(..., description="0 valid, 1 errors, 2 warnings")
    errors: list[dict[str, Any]] = Field(default_factory=list, description="Validation errors")
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class FrameSchema(BaseModel):
    """Frame moulding catalog entry."""

    id: str
    code: str
    name: str
    width: float = Field(..., description="Face width in cm")
    depth: float = Field(..., description="Depth in cm")
    rebate: float = Field(..., description="Rebate in cm")
    material: str
    color: str
    fill_color: str = Field(..., description="Hex color used for drawing")
    price_rate_per_meter: float
    categories: list[str] = Field(default_factory=list)


class MatBoardSchema(BaseModel):
    """Mat board catalog entry."""

    id: str
    name: str
    color: str
    core: str
    core_color: str


class StandardSizeSchema(BaseModel):
    """Standard print size."""

    name: str
    label: str
    width: float = Field(..., description="Width in cm")
    height: float = Field(..., description="Height in cm")
    width_inch: float
    height_inch: float


class FrameListSchema(BaseModel):
    frames: list[FrameSchema]


class MatBoardListSchema(BaseModel):
    mats: list[MatBoardSchema]


class StandardSizeListSchema(BaseModel):
    sizes: list[StandardSizeSchema]


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
