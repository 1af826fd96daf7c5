"""Integration tests for the configuration to layout, price and export pipeline."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from framing.application.config import load_config
from framing.application.factory import ServiceFactory
from framing.domain import (
    PrintOption,
    RegionKind,
    effective_outside_size,
)
from framing.infrastructure.exporters import ExportManager

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def factory() -> ServiceFactory:
    return ServiceFactory()


def compose_fixture(factory: ServiceFactory, name: str):
    config = load_config(FIXTURES_DIR / name)
    command = factory.create_compose_command()
    return config, command.execute_config(config, factory.get_catalog())


class TestSingleMatPipeline:
    """valid_single_mat.json end to end."""

    def test_price_and_labels(self, factory) -> None:
        _, output = compose_fixture(factory, "valid_single_mat.json")
        assert output.is_valid
        assert output.price.total == pytest.approx(167.75)
        assert output.layout.labels.outside_size.width == pytest.approx(32.0)
        assert output.layout.labels.outside_size.height == pytest.approx(42.0)

    def test_layout_and_price_share_matted_size(self, factory) -> None:
        """Pricing charges the matted size; the outside label adds the border to it."""
        _, output = compose_fixture(factory, "valid_single_mat.json")
        matted = effective_outside_size(output.order)
        border = output.layout.frame_border
        outside = output.layout.labels.outside_size
        assert outside.width == pytest.approx(matted.width + 2 * border)
        assert outside.height == pytest.approx(matted.height + 2 * border)
        assert output.price.frame.basis == pytest.approx(matted.perimeter)
        assert output.price.glass.basis == pytest.approx(matted.area)

        top_mat = output.layout.mat_boxes[0]
        px = output.layout.px_per_cm
        assert top_mat.width / px == pytest.approx(matted.width)
        assert top_mat.height / px == pytest.approx(matted.height)


class TestDoubleMatPipeline:
    """valid_double_mat.json: inch units, standard size, groove, extras, printing."""

    def test_order(self, factory) -> None:
        _, output = compose_fixture(factory, "valid_double_mat.json")
        order = output.order
        assert order.frame.id == "224F"
        assert order.mat.is_double
        assert order.print_option is PrintOption.PROFESSIONAL
        assert order.quantity == 2

    def test_layout(self, factory) -> None:
        _, output = compose_fixture(factory, "valid_double_mat.json")
        layout = output.layout
        assert len(layout.mat_boxes) == 2
        assert layout.regions[-1].kind is RegionKind.V_GROOVE
        # 8x10 preset is stored in cm; 2 inch mat on each side, 0.5 cm reveal
        matted_width = 20.3 + 2 * 5.08 + 2 * 0.5
        assert layout.mat_boxes[1].width / layout.px_per_cm == pytest.approx(matted_width)
        assert layout.labels.image_size.width == pytest.approx(20.3)

    def test_price(self, factory) -> None:
        _, output = compose_fixture(factory, "valid_double_mat.json")
        price = output.price
        assert price.printing.basis == pytest.approx(20.3 * 25.4)
        assert price.extras.total == pytest.approx(8.0 + 18.0)
        assert price.total == pytest.approx(2 * (price.subtotal + price.tax))

    def test_exports_configured_formats(self, factory, tmp_path: Path) -> None:
        config, output = compose_fixture(factory, "valid_double_mat.json")
        files = ExportManager(tmp_path).export_all(
            config.output.formats, output, config.output.project_name
        )
        assert sorted(path.name for path in files.values()) == [
            "gallery_json.json",
            "gallery_svg.svg",
        ]
        data = json.loads(files["json"].read_text())
        assert data["order"]["quantity"] == 2
        assert data["layout"]["regions"][-1]["kind"] == "v_groove"
        assert 'class="v_groove"' in files["svg"].read_text()


class TestIncompleteOrder:
    """valid_with_warnings.json has no frame and an incomplete double mat."""

    def test_picture_only_and_zero_price(self, factory) -> None:
        _, output = compose_fixture(factory, "valid_with_warnings.json")
        assert output.is_valid
        assert [region.kind for region in output.layout.regions] == [RegionKind.PICTURE]
        assert output.price.is_zero
        assert output.warnings
