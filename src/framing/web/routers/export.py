"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from framing.infrastructure.exporters import ExporterRegistry, UnsupportedFormatError
from framing.web.dependencies import CatalogDep, ComposeCommandDep
from framing.web.routers.compose import compose_from_request
from framing.web.schemas.requests import ConfigRequest
from framing.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES: dict[str, str] = {
    "svg": "image/svg+xml",
    "json": "application/json",
    "dxf": "application/dxf",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_format(
    format_name: str,
    request: ConfigRequest,
    command: ComposeCommandDep,
    catalog: CatalogDep,
) -> Response:
    """Export an order to any registered format.

    Raises:
        UnsupportedFormatError: If format is not registered (handled by
            exception handler as 400).
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    output = compose_from_request(request, command, catalog)

    exporter = ExporterRegistry.get(format_name)()
    content = exporter.export_string(output)
    filename = f"frame.{exporter.file_extension}"
    return Response(
        content=content,
        media_type=MEDIA_TYPES.get(format_name, "text/plain"),
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
