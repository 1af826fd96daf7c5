"""Pricing engine for framing orders."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..entities import OrderConfiguration
from ..value_objects import (
    BackingOption,
    ExtraOption,
    ExtrasLine,
    GlassOption,
    LineItem,
    PriceBreakdown,
    PrintOption,
)
from .geometry import normalize_order

__all__ = ["DEFAULT_RATES", "PricingEngine", "RateTable"]

logger = logging.getLogger(__name__)

CM_PER_METER = 100.0
# Outside area (cm²) above which labor grows proportionally
LABOR_SIZE_THRESHOLD_CM2 = 10000.0


def _require_all(table: Mapping[Enum, float], enum_cls: type[Enum], name: str) -> None:
    missing = [member.value for member in enum_cls if member not in table]
    if missing:
        raise ValueError(f"{name} rate table is missing: {', '.join(missing)}")
    negative = [key.value for key, rate in table.items() if rate < 0]
    if negative:
        raise ValueError(f"{name} rates must be non-negative: {', '.join(negative)}")


@dataclass(frozen=True, eq=False)
class RateTable:
    """All rates the pricing engine uses.

    Every option enum member must have an entry; a missing rate is a
    construction error rather than a silent default.

    Attributes:
        mat_rate: Mat board price per cm² of outside area.
        glass_rates: Glazing price per cm² of outside area.
        backing_rates: Backing price per cm² of outside area.
        extra_fees: Flat fee per extra.
        print_rates: Printing price per cm² of image area.
        base_labor: Labor for a plain frame below the size threshold.
        mat_labor_multiplier: Labor multiplier when a mat is cut.
        tax_rate: Flat tax rate applied to the subtotal.
    """

    glass_rates: Mapping[GlassOption, float]
    backing_rates: Mapping[BackingOption, float]
    extra_fees: Mapping[ExtraOption, float]
    print_rates: Mapping[PrintOption, float]
    mat_rate: float = 0.05
    base_labor: float = 25.0
    mat_labor_multiplier: float = 1.5
    tax_rate: float = 0.10

    def __post_init__(self) -> None:
        _require_all(self.glass_rates, GlassOption, "Glass")
        _require_all(self.backing_rates, BackingOption, "Backing")
        _require_all(self.extra_fees, ExtraOption, "Extras")
        _require_all(self.print_rates, PrintOption, "Print")
        for name in ("mat_rate", "base_labor", "mat_labor_multiplier", "tax_rate"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        for name in ("glass_rates", "backing_rates", "extra_fees", "print_rates"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))


DEFAULT_RATES = RateTable(
    glass_rates={
        GlassOption.CLEAR: 0.03,
        GlassOption.UV: 0.045,
        GlassOption.ANTI_GLARE: 0.04,
        GlassOption.MUSEUM: 0.06,
    },
    backing_rates={
        BackingOption.STANDARD: 0.01,
        BackingOption.FOAM: 0.012,
        BackingOption.ARCHIVAL: 0.015,
        BackingOption.CONSERVATION: 0.02,
    },
    extra_fees={
        ExtraOption.STANDARD_SHIPPING: 15.0,
        ExtraOption.EXPRESS_SHIPPING: 25.0,
        ExtraOption.OVERNIGHT_SHIPPING: 45.0,
        ExtraOption.FRAME_PROTECTION: 12.0,
        ExtraOption.INSURANCE: 8.0,
        ExtraOption.CUSTOM_PLAQUE: 18.0,
        ExtraOption.GIFT_WRAPPING: 12.0,
        ExtraOption.GIFT_CARD: 5.0,
        ExtraOption.WHITE_GLOVE: 75.0,
        ExtraOption.INSTALLATION: 50.0,
    },
    print_rates={
        PrintOption.STANDARD: 0.15,
        PrintOption.PREMIUM: 0.25,
        PrintOption.PROFESSIONAL: 0.40,
    },
)


@dataclass
class PricingEngine:
    """Prices an order from the same geometry the layout engine draws.

    Moulding is charged on the perimeter of the matted composition, sheet
    goods (mat, glass, backing) on its area. Nothing is rounded here;
    rounding to cents happens at presentation time.
    """

    rates: RateTable = field(default_factory=lambda: DEFAULT_RATES)

    def compute_price(self, config: OrderConfiguration) -> PriceBreakdown:
        """Compute the itemized price of an order.

        Args:
            config: Order configuration snapshot.

        Returns:
            The price breakdown. All zero when no frame is selected or the
            image size is not positive.
        """
        order = normalize_order(config)
        if order.frame is None or not order.image_is_valid:
            logger.debug("Order not priceable yet; returning zero breakdown")
            return PriceBreakdown.zero(config.quantity)

        rates = self.rates
        outside = order.matted_size
        outside_area = outside.area
        perimeter = outside.perimeter

        frame = LineItem(
            basis=perimeter,
            rate=order.frame.price_rate_per_meter,
            total=(perimeter / CM_PER_METER) * order.frame.price_rate_per_meter,
        )
        mat_rate = rates.mat_rate if order.mat_active else 0.0
        mat = LineItem(basis=outside_area, rate=mat_rate, total=outside_area * mat_rate)

        glass_rate = rates.glass_rates[config.glass]
        glass = LineItem(
            basis=outside_area, rate=glass_rate, total=outside_area * glass_rate
        )
        backing_rate = rates.backing_rates[config.backing]
        backing = LineItem(
            basis=outside_area, rate=backing_rate, total=outside_area * backing_rate
        )

        printing = LineItem()
        if config.print_option is not None:
            image_area = order.image.area
            print_rate = rates.print_rates[config.print_option]
            printing = LineItem(
                basis=image_area, rate=print_rate, total=image_area * print_rate
            )

        # Sorted so the breakdown does not depend on set iteration order
        selected = tuple(sorted(config.extras, key=lambda extra: extra.value))
        extras = ExtrasLine(
            items=selected,
            total=sum((rates.extra_fees[extra] for extra in selected), 0.0),
        )

        complexity = rates.mat_labor_multiplier if order.mat_active else 1.0
        size_factor = max(1.0, outside_area / LABOR_SIZE_THRESHOLD_CM2)
        labor = rates.base_labor * complexity * size_factor

        subtotal = (
            frame.total
            + mat.total
            + glass.total
            + backing.total
            + printing.total
            + labor
            + extras.total
        )
        tax = subtotal * rates.tax_rate
        total = (subtotal + tax) * config.quantity

        logger.debug(
            f"Priced {outside.width:.2f} x {outside.height:.2f} cm order: "
            f"subtotal {subtotal:.4f}, total {total:.4f} for {config.quantity} piece(s)"
        )
        return PriceBreakdown(
            frame=frame,
            mat=mat,
            glass=glass,
            backing=backing,
            printing=printing,
            extras=extras,
            labor=labor,
            subtotal=subtotal,
            tax=tax,
            total=total,
            quantity=config.quantity,
        )
