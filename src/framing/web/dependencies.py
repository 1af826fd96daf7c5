"""FastAPI dependency injection for framing services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from framing.application.catalog import CatalogManager
from framing.application.commands import ComposeFrameCommand
from framing.application.factory import ServiceFactory, get_factory


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_compose_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> ComposeFrameCommand:
    """Dependency for ComposeFrameCommand."""
    return factory.create_compose_command()


def get_catalog(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> CatalogManager:
    """Dependency for the shared CatalogManager."""
    return factory.get_catalog()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
ComposeCommandDep = Annotated[ComposeFrameCommand, Depends(get_compose_command)]
CatalogDep = Annotated[CatalogManager, Depends(get_catalog)]
