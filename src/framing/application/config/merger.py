"""Configuration merging utilities for CLI override support.

Precedence is: CLI args > config values > defaults. Only CLI arguments that
are not None override configuration values.
"""

from typing import Any

from framing.application.config.loader import load_config_from_dict
from framing.application.config.schemas import FramingConfiguration


def _base_data(config: FramingConfiguration | None) -> dict[str, Any]:
    if config is None:
        return {"schema_version": "1.0", "image": {}}
    return config.model_dump(mode="json")


def merge_config_with_cli(
    config: FramingConfiguration | None,
    *,
    width: float | None = None,
    height: float | None = None,
    units: str | None = None,
    standard_size: str | None = None,
    frame: str | None = None,
    mat_style: str | None = None,
    mat_width: float | None = None,
    mat_board: str | None = None,
    bottom_board: str | None = None,
    v_groove: bool | None = None,
    glass: str | None = None,
    backing: str | None = None,
    extras: list[str] | None = None,
    print_option: str | None = None,
    quantity: int | None = None,
    output_formats: list[str] | None = None,
    output_dir: str | None = None,
    project_name: str | None = None,
) -> FramingConfiguration:
    """Merge CLI arguments with configuration values.

    With no base configuration a fresh document is built from the CLI
    arguments alone.

    Returns:
        A new, validated FramingConfiguration.

    Raises:
        ConfigError: If the merged document does not validate.

    Example:
        >>> config = load_config(Path("order.json"))
        >>> merged = merge_config_with_cli(config, quantity=3)
        >>> merged.quantity
        3
    """
    data = _base_data(config)

    if units is not None:
        data["units"] = units

    image = data.setdefault("image", {})
    if standard_size is not None:
        image.update({"standard_size": standard_size, "width": None, "height": None})
    if width is not None:
        image["width"] = width
        image["standard_size"] = None
    if height is not None:
        image["height"] = height
        image["standard_size"] = None

    if frame is not None:
        data["frame"] = frame

    mat = data.setdefault("mat", {})
    if mat_style is not None:
        mat["style"] = mat_style
    if mat_width is not None:
        mat["width_mode"] = "uniform"
        mat["uniform_width"] = mat_width
    if mat_board is not None:
        mat["top_board"] = mat_board
    if bottom_board is not None:
        mat["bottom_board"] = bottom_board
    if v_groove is not None:
        mat["v_groove"] = v_groove

    if glass is not None:
        data["glass"] = glass
    if backing is not None:
        data["backing"] = backing
    if extras:
        data["extras"] = list(extras)
    if print_option is not None:
        data["print_option"] = print_option
    if quantity is not None:
        data["quantity"] = quantity

    output = data.setdefault("output", {})
    if output_formats:
        output["formats"] = list(output_formats)
    if output_dir is not None:
        output["output_dir"] = output_dir
    if project_name is not None:
        output["project_name"] = project_name

    return load_config_from_dict(data)
