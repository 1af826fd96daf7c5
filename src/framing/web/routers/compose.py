"""Composition endpoints: layout and price of a framing order."""

from fastapi import APIRouter

from framing.application.config import load_config_from_dict
from framing.contracts.dtos import CompositionOutput
from framing.infrastructure.exporters import layout_to_dict, price_to_dict
from framing.web.dependencies import CatalogDep, ComposeCommandDep
from framing.web.schemas.requests import ConfigRequest
from framing.web.schemas.responses import (
    ComposeResponseSchema,
    LayoutSchema,
    PriceBreakdownSchema,
)

router = APIRouter(tags=["compose"])


def compose_from_request(
    request: ConfigRequest,
    command: ComposeCommandDep,
    catalog: CatalogDep,
) -> CompositionOutput:
    """Validate the request configuration and compose it.

    Raises:
        ConfigError: If the configuration is invalid or references an
            unknown catalog entry (handled by exception handler).
    """
    config = load_config_from_dict(request.config)
    return command.execute_config(config, catalog)


def _layout_schema(output: CompositionOutput) -> LayoutSchema:
    return LayoutSchema.model_validate(layout_to_dict(output.layout))


def _price_schema(output: CompositionOutput) -> PriceBreakdownSchema:
    return PriceBreakdownSchema.model_validate(price_to_dict(output.price))


@router.post("/compose", response_model=ComposeResponseSchema)
async def compose(
    request: ConfigRequest,
    command: ComposeCommandDep,
    catalog: CatalogDep,
) -> ComposeResponseSchema:
    """Compute the layout and price of an order from one configuration.

    Both results come from the same snapshot and share one matted-size
    computation; the outside size label adds the frame border to it.
    """
    output = compose_from_request(request, command, catalog)
    return ComposeResponseSchema(
        is_valid=output.is_valid,
        warnings=output.warnings,
        layout=_layout_schema(output),
        price=_price_schema(output),
    )


@router.post("/price", response_model=PriceBreakdownSchema)
async def price(
    request: ConfigRequest,
    command: ComposeCommandDep,
    catalog: CatalogDep,
) -> PriceBreakdownSchema:
    """Compute the itemized, unrounded price of an order."""
    output = compose_from_request(request, command, catalog)
    return _price_schema(output)


@router.post("/layout", response_model=LayoutSchema)
async def layout(
    request: ConfigRequest,
    command: ComposeCommandDep,
    catalog: CatalogDep,
) -> LayoutSchema:
    """Compute the paint regions and size labels of an order."""
    output = compose_from_request(request, command, catalog)
    return _layout_schema(output)
