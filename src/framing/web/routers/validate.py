"""Configuration validation endpoints."""

from fastapi import APIRouter

from framing.application.config import load_config_from_dict, validate_config
from framing.web.dependencies import CatalogDep
from framing.web.schemas.requests import ConfigValidateRequest
from framing.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
    catalog: CatalogDep,
) -> ValidationResultSchema:
    """Validate a framing configuration without composing it.

    Schema errors are returned as 422 by the ConfigError handler; catalog
    errors and framing advisories are reported in the body.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config, catalog)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        exit_code=result.exit_code,
        errors=[
            {"message": e.message, "path": e.path, "value": e.value}
            for e in result.errors
        ],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
