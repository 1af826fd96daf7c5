"""Unit tests for merging CLI overrides into configurations."""

import pytest

from framing.application.config import (
    ConfigError,
    load_config_from_dict,
    merge_config_with_cli,
)
from framing.domain import ExtraOption, GlassOption, LengthUnit, MatStyle, MatWidthMode


class TestMergeWithoutConfig:
    """Building a configuration from CLI arguments alone."""

    def test_inline_order(self) -> None:
        config = merge_config_with_cli(None, width=20, height=30, frame="103F")
        assert config.schema_version == "1.0"
        assert config.image.width == 20
        assert config.frame == "103F"

    def test_standard_size(self) -> None:
        config = merge_config_with_cli(None, standard_size="A4", frame="103F")
        assert config.image.standard_size == "A4"
        assert config.image.width is None

    def test_missing_image_size_is_an_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(None, frame="103F")
        assert exc_info.value.error_type == "validation"

    def test_invalid_option_value_is_an_error(self) -> None:
        with pytest.raises(ConfigError):
            merge_config_with_cli(None, width=20, height=30, glass="plastic")


class TestMergeWithConfig:
    """CLI arguments override configuration values."""

    @pytest.fixture
    def config(self, single_mat_config_data):
        return load_config_from_dict(
            {**single_mat_config_data, "extras": ["insurance"], "units": "cm"}
        )

    def test_none_arguments_keep_config(self, config) -> None:
        merged = merge_config_with_cli(config)
        assert merged == config

    def test_scalar_overrides(self, config) -> None:
        merged = merge_config_with_cli(
            config, quantity=4, glass="museum", units="inch", frame="224F"
        )
        assert merged.quantity == 4
        assert merged.glass is GlassOption.MUSEUM
        assert merged.units is LengthUnit.INCH
        assert merged.frame == "224F"

    def test_original_is_not_modified(self, config) -> None:
        merge_config_with_cli(config, quantity=4)
        assert config.quantity == 1

    def test_width_replaces_standard_size(self) -> None:
        base = load_config_from_dict(
            {"schema_version": "1.0", "image": {"standard_size": "A4"}}
        )
        merged = merge_config_with_cli(base, width=10, height=15)
        assert merged.image.standard_size is None
        assert merged.image.height == 15

    def test_mat_overrides(self, config) -> None:
        merged = merge_config_with_cli(
            config, mat_style="double", mat_width=6, bottom_board="3", v_groove=True
        )
        assert merged.mat.style is MatStyle.DOUBLE
        assert merged.mat.width_mode is MatWidthMode.UNIFORM
        assert merged.mat.uniform_width == 6
        assert merged.mat.top_board == "1"
        assert merged.mat.bottom_board == "3"
        assert merged.mat.v_groove is True

    def test_v_groove_can_be_turned_off(self, config) -> None:
        grooved = merge_config_with_cli(config, v_groove=True)
        assert merge_config_with_cli(grooved, v_groove=False).mat.v_groove is False

    def test_extras_replace_list(self, config) -> None:
        merged = merge_config_with_cli(config, extras=["gift-card"])
        assert merged.extras == [ExtraOption.GIFT_CARD]

    def test_empty_extras_keep_config(self, config) -> None:
        merged = merge_config_with_cli(config, extras=[])
        assert merged.extras == [ExtraOption.INSURANCE]

    def test_output_overrides(self, config) -> None:
        merged = merge_config_with_cli(
            config, output_formats=["svg", "json"], output_dir="out", project_name="portrait"
        )
        assert merged.output.formats == ["svg", "json"]
        assert merged.output.output_dir == "out"
        assert merged.output.project_name == "portrait"
