"""Pydantic schemas for the REST API."""

from framing.web.schemas.common import LineItemSchema, RectSchema, SizeSchema
from framing.web.schemas.requests import ConfigRequest, ConfigValidateRequest
from framing.web.schemas.responses import (
    ComposeResponseSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    FrameListSchema,
    FrameSchema,
    LayoutSchema,
    MatBoardListSchema,
    MatBoardSchema,
    PriceBreakdownSchema,
    RegionSchema,
    SizeLabelsSchema,
    StandardSizeListSchema,
    StandardSizeSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "LineItemSchema",
    "RectSchema",
    "SizeSchema",
    # Requests
    "ConfigRequest",
    "ConfigValidateRequest",
    # Responses
    "ComposeResponseSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "FrameListSchema",
    "FrameSchema",
    "LayoutSchema",
    "MatBoardListSchema",
    "MatBoardSchema",
    "PriceBreakdownSchema",
    "RegionSchema",
    "SizeLabelsSchema",
    "StandardSizeListSchema",
    "StandardSizeSchema",
    "ValidationResultSchema",
]
