"""Shipped unit configuration and number helpers. Base unit is always meters."""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

BASE_UNIT = "meters"

# factor ("unit") = meters per one unit
DEFAULT_CONFIG = {
    "units": {
        "meters": {"unit": 1.0, "decimals": 2, "suffix": "m"},
        "kilometers": {"unit": 1000.0, "decimals": 2, "suffix": "km"},
        "miles": {"unit": 1609.34, "decimals": 2, "suffix": "mi"},
        # 1000 m -> 1458 steps
        "footsteps": {"unit": 0.6858, "decimals": 0, "suffix": "steps"},
    },
    "format": {
        "comma": True,
        "suffix": False,
    },
}


def round_half_up(value: float, decimals: int) -> float:
    """Round to `decimals` places, halves away from zero (2.675 -> 2.68).

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # enough digits for the integer part plus the kept decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + decimals + 2)
        return float(exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP))


def format_number(value: float, decimals: int, thousands: str = ",") -> str:
    """Fixed-point rendering with '.' as decimal point and an optional thousands separator."""
    rounded = round_half_up(value, decimals) + 0.0  # drop negative zero
    text = f"{rounded:,.{decimals}f}"
    if thousands != ",":
        text = text.replace(",", thousands)
    return text
