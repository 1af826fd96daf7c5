"""Domain entities: mat configuration and the order configuration aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .value_objects import (
    BackingOption,
    ExtraOption,
    FrameProfile,
    GlassOption,
    Length,
    LengthUnit,
    MatBoard,
    MatStyle,
    MatWidthMode,
    PrintOption,
)


@dataclass(frozen=True)
class SideLengths:
    """Per-side mat widths as entered by the customer."""

    top: Length = field(default_factory=lambda: Length.cm(5.0))
    bottom: Length = field(default_factory=lambda: Length.cm(5.0))
    left: Length = field(default_factory=lambda: Length.cm(5.0))
    right: Length = field(default_factory=lambda: Length.cm(5.0))

    @classmethod
    def uniform(cls, width: Length) -> "SideLengths":
        return cls(top=width, bottom=width, left=width, right=width)


@dataclass(frozen=True)
class MatConfiguration:
    """Mat selection for an order.

    When ``style`` is NONE no mat geometry or cost is produced, whatever the
    other fields hold. A style that needs a board without one selected is
    treated the same way.

    Attributes:
        style: None, single or double mat.
        width_mode: Uniform or per-side widths.
        uniform_width: Width used on all sides in uniform mode.
        custom_widths: Per-side widths in custom mode.
        top_board: Board of the top (or only) mat.
        bottom_board: Board of the bottom mat (double style only).
        bottom_width: Reveal of the bottom mat beyond the top mat.
        v_groove: Whether a decorative groove is cut.
    """

    style: MatStyle = MatStyle.NONE
    width_mode: MatWidthMode = MatWidthMode.UNIFORM
    uniform_width: Length = field(default_factory=lambda: Length.cm(5.0))
    custom_widths: SideLengths = field(default_factory=SideLengths)
    top_board: MatBoard | None = None
    bottom_board: MatBoard | None = None
    bottom_width: Length = field(default_factory=lambda: Length.cm(0.5))
    v_groove: bool = False

    @property
    def is_active(self) -> bool:
        """True if a mat is actually selected."""
        return self.style is not MatStyle.NONE and self.top_board is not None

    @property
    def is_double(self) -> bool:
        """True if a bottom mat contributes geometry."""
        return (
            self.is_active
            and self.style is MatStyle.DOUBLE
            and self.bottom_board is not None
        )


@dataclass(frozen=True)
class ImageSize:
    """Picture content size, the quantity the customer edits directly."""

    width: Length
    height: Length


@dataclass(frozen=True)
class OrderConfiguration:
    """Everything needed to lay out and price one framing order.

    Immutable: each edit produces a new value, so the layout and pricing
    engines always read the same snapshot.

    Attributes:
        image_size: Picture content size.
        units: Display unit only; stored lengths carry their own unit.
        frame: Selected frame profile, if any.
        mat: Mat selection.
        glass: Glazing option.
        backing: Backing option.
        extras: Selected flat-fee extras.
        print_option: Print service tier, if the shop prints the image.
        quantity: Number of identical framed pieces.
    """

    image_size: ImageSize
    units: LengthUnit = LengthUnit.CM
    frame: FrameProfile | None = None
    mat: MatConfiguration = field(default_factory=MatConfiguration)
    glass: GlassOption = GlassOption.CLEAR
    backing: BackingOption = BackingOption.STANDARD
    extras: frozenset[ExtraOption] = field(default_factory=frozenset)
    print_option: PrintOption | None = None
    quantity: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise TypeError("Quantity must be an integer")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")
        if not isinstance(self.extras, frozenset):
            object.__setattr__(self, "extras", frozenset(self.extras))

    def with_changes(self, **changes: Any) -> "OrderConfiguration":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
