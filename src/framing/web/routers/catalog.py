"""Catalog browsing endpoints."""

from fastapi import APIRouter

from framing.domain import FrameMaterial, FrameProfile, MatBoard, StandardSize
from framing.web.dependencies import CatalogDep
from framing.web.schemas.responses import (
    FrameListSchema,
    FrameSchema,
    MatBoardListSchema,
    MatBoardSchema,
    StandardSizeListSchema,
    StandardSizeSchema,
)

router = APIRouter(prefix="/catalog", tags=["catalog"])


def _frame_schema(frame: FrameProfile) -> FrameSchema:
    return FrameSchema(
        id=frame.id,
        code=frame.code,
        name=frame.name,
        width=frame.width,
        depth=frame.depth,
        rebate=frame.rebate,
        material=frame.material.value,
        color=frame.color.value,
        fill_color=frame.fill_color,
        price_rate_per_meter=frame.price_rate_per_meter,
        categories=list(frame.categories),
    )


def _board_schema(board: MatBoard) -> MatBoardSchema:
    return MatBoardSchema(
        id=board.id,
        name=board.name,
        color=board.color,
        core=board.core.value,
        core_color=board.core_color,
    )


def _size_schema(size: StandardSize) -> StandardSizeSchema:
    return StandardSizeSchema(
        name=size.name,
        label=size.label,
        width=size.width,
        height=size.height,
        width_inch=size.width_inch,
        height_inch=size.height_inch,
    )


@router.get("/frames", response_model=FrameListSchema)
async def list_frames(
    catalog: CatalogDep,
    material: FrameMaterial | None = None,
    category: str | None = None,
) -> FrameListSchema:
    """List frame mouldings, optionally filtered by material or category."""
    frames = catalog.list_frames(material=material, category=category)
    return FrameListSchema(frames=[_frame_schema(frame) for frame in frames])


@router.get("/frames/{frame_id}", response_model=FrameSchema)
async def get_frame(frame_id: str, catalog: CatalogDep) -> FrameSchema:
    """Get one frame moulding (404 if unknown)."""
    return _frame_schema(catalog.get_frame(frame_id))


@router.get("/mats", response_model=MatBoardListSchema)
async def list_mats(catalog: CatalogDep) -> MatBoardListSchema:
    """List mat boards."""
    return MatBoardListSchema(mats=[_board_schema(b) for b in catalog.list_mat_boards()])


@router.get("/mats/{board_id}", response_model=MatBoardSchema)
async def get_mat(board_id: str, catalog: CatalogDep) -> MatBoardSchema:
    """Get one mat board (404 if unknown)."""
    return _board_schema(catalog.get_mat_board(board_id))


@router.get("/sizes", response_model=StandardSizeListSchema)
async def list_sizes(catalog: CatalogDep) -> StandardSizeListSchema:
    """List standard print sizes."""
    return StandardSizeListSchema(
        sizes=[_size_schema(size) for size in catalog.list_standard_sizes()]
    )
