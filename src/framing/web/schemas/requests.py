"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class ConfigRequest(BaseModel):
    """Request carrying a full framing order configuration.

    The configuration is validated by the same loader the CLI uses, so
    schema errors come back as ``{error, error_type, details}``.
    """

    config: dict[str, Any] = Field(..., description="Framing order configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Framing order configuration JSON")
