"""Pytest configuration and shared fixtures for framing tests."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import pytest

from framing.domain import (
    FrameMaterial,
    FrameProfile,
    ImageSize,
    Length,
    MatBoard,
    MatConfiguration,
    MatStyle,
    OrderConfiguration,
)
from framing.domain.value_objects import FrameColor, MatCore

if TYPE_CHECKING:
    from framing.application.catalog import CatalogManager
    from framing.application.commands import ComposeFrameCommand


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Catalog records
# =============================================================================


@pytest.fixture
def wood_frame() -> FrameProfile:
    """Black wood moulding: 2 cm face, 0.5 cm rebate, 5 per meter."""
    return FrameProfile(
        id="103F",
        code="103F",
        width=2.0,
        depth=4.0,
        rebate=0.5,
        material=FrameMaterial.WOOD,
        color=FrameColor.BLACK,
        price_rate_per_meter=5.0,
    )


@pytest.fixture
def floating_frame(wood_frame: FrameProfile) -> FrameProfile:
    """The wood frame with the floating material."""
    return replace(wood_frame, id="FL-TEST", material=FrameMaterial.FLOATING)


@pytest.fixture
def white_board() -> MatBoard:
    return MatBoard(id="1", name="Neutral White", color="#fffdf8")


@pytest.fixture
def black_board() -> MatBoard:
    return MatBoard(id="3", name="Black", color="#222222", core=MatCore.BLACK_CORE)


# =============================================================================
# Orders
# =============================================================================


def _build_order(
    width: float = 20.0,
    height: float = 30.0,
    frame: FrameProfile | None = None,
    mat: MatConfiguration | None = None,
    **kwargs,
) -> OrderConfiguration:
    """Build an order with a cm image size."""
    return OrderConfiguration(
        image_size=ImageSize(width=Length.cm(width), height=Length.cm(height)),
        frame=frame,
        mat=mat or MatConfiguration(),
        **kwargs,
    )


@pytest.fixture
def make_order():
    """Factory building an order with a cm image size."""
    return _build_order


@pytest.fixture
def plain_order(wood_frame: FrameProfile) -> OrderConfiguration:
    """20 x 30 cm image in the wood frame, no mat."""
    return _build_order(frame=wood_frame)


@pytest.fixture
def single_mat(white_board: MatBoard) -> MatConfiguration:
    """Single white mat, 5 cm on every side."""
    return MatConfiguration(
        style=MatStyle.SINGLE,
        uniform_width=Length.cm(5.0),
        top_board=white_board,
    )


@pytest.fixture
def single_mat_order(
    wood_frame: FrameProfile, single_mat: MatConfiguration
) -> OrderConfiguration:
    """20 x 30 cm image, wood frame, 5 cm single mat."""
    return _build_order(frame=wood_frame, mat=single_mat)


# =============================================================================
# Application services
# =============================================================================


@pytest.fixture
def catalog() -> "CatalogManager":
    """The bundled catalog."""
    from framing.application.catalog import CatalogManager

    return CatalogManager()


@pytest.fixture
def compose_command() -> "ComposeFrameCommand":
    """Create a ComposeFrameCommand through the service factory."""
    from framing.application.factory import get_factory

    return get_factory().create_compose_command()


@pytest.fixture
def minimal_config_data() -> dict:
    """Smallest valid configuration document."""
    return {
        "schema_version": "1.0",
        "image": {"width": 20, "height": 30},
        "frame": "103F",
    }


@pytest.fixture
def single_mat_config_data(minimal_config_data: dict) -> dict:
    """Configuration document with a 5 cm single mat from the catalog."""
    return {
        **minimal_config_data,
        "mat": {"style": "single", "uniform_width": 5, "top_board": "1"},
    }
