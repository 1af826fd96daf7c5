"""Adapter converting a FramingConfiguration into domain objects.

Catalog ids are resolved here, and every configuration length becomes a
domain Length tagged with its unit. Unknown catalog ids raise ConfigError
with error_type "catalog".
"""

from collections.abc import Callable
from typing import TypeVar

from framing.application.catalog import (
    CatalogEntryNotFoundError,
    CatalogManager,
    FrameProfileConfig,
    MatBoardConfig,
)
from framing.application.config.loader import ConfigError
from framing.application.config.schemas import (
    FramingConfiguration,
    LengthConfig,
    LengthInput,
    MatConfig,
)
from framing.domain.entities import (
    ImageSize,
    MatConfiguration,
    OrderConfiguration,
    SideLengths,
)
from framing.domain.services import RenderSurface
from framing.domain.value_objects import (
    FrameProfile,
    Length,
    LengthUnit,
    MatBoard,
)

T = TypeVar("T")


def config_to_length(value: LengthInput, units: LengthUnit) -> Length:
    """Convert a configuration length, applying the document units to bare numbers."""
    if isinstance(value, LengthConfig):
        return Length(value=value.value, unit=value.unit or units)
    return Length(value=float(value), unit=units)


def _lookup(path: str, lookup: Callable[[str], T], entry_id: str) -> T:
    try:
        return lookup(entry_id)
    except CatalogEntryNotFoundError as e:
        raise ConfigError(
            message=f"{path}: {e}",
            error_type="catalog",
            details=[{"path": path, "message": str(e), "value": entry_id}],
        ) from e


def resolve_frame(
    ref: str | FrameProfileConfig | None,
    catalog: CatalogManager,
) -> FrameProfile | None:
    """Resolve a frame reference (catalog id or inline record)."""
    if ref is None:
        return None
    if isinstance(ref, FrameProfileConfig):
        return ref.to_profile()
    return _lookup("frame", catalog.get_frame, ref)


def resolve_mat_board(
    ref: str | MatBoardConfig | None,
    catalog: CatalogManager,
    path: str,
) -> MatBoard | None:
    """Resolve a mat board reference (catalog id or inline record)."""
    if ref is None:
        return None
    if isinstance(ref, MatBoardConfig):
        return ref.to_board()
    return _lookup(path, catalog.get_mat_board, ref)


def config_to_image_size(
    config: FramingConfiguration,
    catalog: CatalogManager,
) -> ImageSize:
    image = config.image
    if image.standard_size is not None:
        size = _lookup("image.standard_size", catalog.get_standard_size, image.standard_size)
        return ImageSize(width=Length.cm(size.width), height=Length.cm(size.height))
    return ImageSize(
        width=config_to_length(image.width, config.units),
        height=config_to_length(image.height, config.units),
    )


def config_to_mat(
    mat: MatConfig,
    units: LengthUnit,
    catalog: CatalogManager,
) -> MatConfiguration:
    widths = mat.custom_widths
    return MatConfiguration(
        style=mat.style,
        width_mode=mat.width_mode,
        uniform_width=config_to_length(mat.uniform_width, units),
        custom_widths=SideLengths(
            top=config_to_length(widths.top, units),
            bottom=config_to_length(widths.bottom, units),
            left=config_to_length(widths.left, units),
            right=config_to_length(widths.right, units),
        ),
        top_board=resolve_mat_board(mat.top_board, catalog, "mat.top_board"),
        bottom_board=resolve_mat_board(mat.bottom_board, catalog, "mat.bottom_board"),
        bottom_width=config_to_length(mat.bottom_width, units),
        v_groove=mat.v_groove,
    )


def config_to_order(
    config: FramingConfiguration,
    catalog: CatalogManager | None = None,
) -> OrderConfiguration:
    """Convert a validated configuration into a domain order configuration.

    Args:
        config: A validated FramingConfiguration instance.
        catalog: Catalog used to resolve ids (defaults to the bundled catalog).

    Returns:
        The order configuration snapshot.

    Raises:
        ConfigError: If a referenced catalog entry does not exist.

    Example:
        >>> config = load_config(Path("order.json"))
        >>> order = config_to_order(config)
        >>> price = PricingEngine().compute_price(order)
    """
    catalog = catalog or CatalogManager()
    return OrderConfiguration(
        image_size=config_to_image_size(config, catalog),
        units=config.units,
        frame=resolve_frame(config.frame, catalog),
        mat=config_to_mat(config.mat, config.units, catalog),
        glass=config.glass,
        backing=config.backing,
        extras=frozenset(config.extras),
        print_option=config.print_option,
        quantity=config.quantity,
    )


def config_to_surface(config: FramingConfiguration) -> RenderSurface:
    """Convert the surface section into a RenderSurface."""
    surface = config.surface
    return RenderSurface(
        padding_px=surface.padding_px,
        px_per_cm=surface.px_per_cm,
        max_width_px=surface.max_width_px,
        max_height_px=surface.max_height_px,
    )
