"""Unit tests for converting configuration documents into domain objects."""

import pytest

from framing.application.config import (
    ConfigError,
    config_to_order,
    config_to_surface,
    load_config_from_dict,
)
from framing.domain import (
    FrameMaterial,
    Length,
    LengthUnit,
    MatStyle,
    MatWidthMode,
    PrintOption,
    UnitConverter,
)


class TestConfigToOrder:
    """Tests for config_to_order."""

    def test_resolves_catalog_frame(self, catalog, minimal_config_data) -> None:
        order = config_to_order(load_config_from_dict(minimal_config_data), catalog)
        assert order.frame.id == "103F"
        assert order.frame.material is FrameMaterial.WOOD
        assert order.frame.rebate == pytest.approx(0.5)
        assert order.image_size.width == Length.cm(20.0)

    def test_resolves_mat_board(self, catalog, single_mat_config_data) -> None:
        order = config_to_order(load_config_from_dict(single_mat_config_data), catalog)
        assert order.mat.style is MatStyle.SINGLE
        assert order.mat.top_board.id == "1"
        assert order.mat.top_board.color == "#fffdf8"
        assert order.mat.uniform_width == Length.cm(5.0)
        assert order.mat.is_active

    def test_no_frame(self, catalog, minimal_config_data) -> None:
        data = {**minimal_config_data, "frame": None}
        order = config_to_order(load_config_from_dict(data), catalog)
        assert order.frame is None

    def test_inline_frame(self, catalog, minimal_config_data) -> None:
        data = {
            **minimal_config_data,
            "frame": {
                "id": "shop-special",
                "width": 3,
                "rebate": 0.7,
                "material": "Aluminium",
                "color": "Silver",
                "price_rate_per_meter": 9,
            },
        }
        order = config_to_order(load_config_from_dict(data), catalog)
        assert order.frame.id == "shop-special"
        assert order.frame.code == "shop-special"
        assert order.frame.material is FrameMaterial.ALUMINIUM

    def test_inline_mat_board(self, catalog, minimal_config_data) -> None:
        data = {
            **minimal_config_data,
            "mat": {
                "style": "single",
                "top_board": {"id": "sage", "color": "#9CAF88"},
            },
        }
        order = config_to_order(load_config_from_dict(data), catalog)
        assert order.mat.top_board.color == "#9caf88"

    def test_unknown_frame_raises_catalog_error(self, catalog, minimal_config_data) -> None:
        data = {**minimal_config_data, "frame": "NOPE"}
        with pytest.raises(ConfigError) as exc_info:
            config_to_order(load_config_from_dict(data), catalog)
        error = exc_info.value
        assert error.error_type == "catalog"
        assert error.details[0]["path"] == "frame"
        assert error.details[0]["value"] == "NOPE"

    def test_unknown_mat_board_raises_catalog_error(
        self, catalog, single_mat_config_data
    ) -> None:
        data = {
            **single_mat_config_data,
            "mat": {**single_mat_config_data["mat"], "top_board": "999"},
        }
        with pytest.raises(ConfigError) as exc_info:
            config_to_order(load_config_from_dict(data), catalog)
        assert exc_info.value.details[0]["path"] == "mat.top_board"

    def test_document_units_apply_to_bare_numbers(self, catalog, minimal_config_data) -> None:
        data = {**minimal_config_data, "units": "inch", "image": {"width": 8, "height": 10}}
        order = config_to_order(load_config_from_dict(data), catalog)
        assert order.units is LengthUnit.INCH
        assert order.image_size.width == Length.inches(8.0)
        assert UnitConverter.length_to_cm(order.image_size.height) == pytest.approx(25.4)

    def test_explicit_unit_overrides_document_units(self, catalog, minimal_config_data) -> None:
        data = {
            **minimal_config_data,
            "units": "inch",
            "image": {"width": {"value": 20, "unit": "cm"}, "height": 10},
        }
        order = config_to_order(load_config_from_dict(data), catalog)
        assert order.image_size.width == Length.cm(20.0)
        assert order.image_size.height == Length.inches(10.0)

    def test_standard_size(self, catalog, minimal_config_data) -> None:
        data = {**minimal_config_data, "image": {"standard_size": "8x10"}}
        order = config_to_order(load_config_from_dict(data), catalog)
        assert order.image_size.width == Length.cm(20.3)
        assert order.image_size.height == Length.cm(25.4)

    def test_unknown_standard_size(self, catalog, minimal_config_data) -> None:
        data = {**minimal_config_data, "image": {"standard_size": "huge"}}
        with pytest.raises(ConfigError) as exc_info:
            config_to_order(load_config_from_dict(data), catalog)
        assert exc_info.value.details[0]["path"] == "image.standard_size"

    def test_custom_widths(self, catalog, single_mat_config_data) -> None:
        data = {
            **single_mat_config_data,
            "mat": {
                "style": "single",
                "top_board": "1",
                "width_mode": "custom",
                "custom_widths": {"top": 2, "bottom": 6, "left": 3, "right": 3},
            },
        }
        order = config_to_order(load_config_from_dict(data), catalog)
        assert order.mat.width_mode is MatWidthMode.CUSTOM
        assert order.mat.custom_widths.bottom == Length.cm(6.0)

    def test_options(self, catalog, minimal_config_data) -> None:
        data = {
            **minimal_config_data,
            "extras": ["insurance", "insurance"],
            "print_option": "premium",
            "quantity": 3,
        }
        order = config_to_order(load_config_from_dict(data), catalog)
        assert len(order.extras) == 1
        assert order.print_option is PrintOption.PREMIUM
        assert order.quantity == 3


class TestConfigToSurface:
    def test_surface(self, minimal_config_data) -> None:
        data = {**minimal_config_data, "surface": {"px_per_cm": 4, "padding_px": 10}}
        surface = config_to_surface(load_config_from_dict(data))
        assert surface.px_per_cm == 4
        assert surface.padding_px == 10
        assert surface.max_width_px == 1500
