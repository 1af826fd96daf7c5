"""Error handlers mapping application exceptions to REST responses.

Every error body has the same shape: ``{error, error_type, details}``.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from framing.application.catalog import CatalogEntryNotFoundError
from framing.application.config import ConfigError
from framing.infrastructure.exporters import ExportError, UnsupportedFormatError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(CatalogEntryNotFoundError)
    async def catalog_not_found_handler(
        request: Request, exc: CatalogEntryNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"kind": exc.kind, "id": exc.entry_id},
            },
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_format",
                "details": {"format": exc.format_name, "available": exc.available},
            },
        )

    @app.exception_handler(ExportError)
    async def export_error_handler(request: Request, exc: ExportError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "export",
                "details": None,
            },
        )
