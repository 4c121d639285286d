"""Amount validation, minor-unit conversion and receipt references."""

import math
import time
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable

from vitalimes.services.payment.errors import InvalidAmountError


MINOR_UNITS_PER_MAJOR = 100


def parse_amount(raw: Any) -> float:
    """Parse a major-unit amount (rupees) from a JSON number or numeric string.

    Raises `InvalidAmountError` unless the value is a finite number > 0.
    """

    # bool is an int subclass; a JSON `true` is not an amount.
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise InvalidAmountError(raw)
    # float() allows digit separators ("1_000"); storefront clients never send them.
    if isinstance(raw, str) and "_" in raw:
        raise InvalidAmountError(raw)
    try:
        amount = float(raw.strip() if isinstance(raw, str) else raw)
    except (ValueError, OverflowError):
        raise InvalidAmountError(raw) from None
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidAmountError(raw)
    return amount


def to_minor_units(amount: float) -> int:
    """Convert major units to integer minor units, rounding half up.

    Works from the shortest repr of the float so 1.005 gives 101, not 100.
    """

    scaled = Decimal(repr(amount)) * MINOR_UNITS_PER_MAJOR
    return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def to_major_units(minor: int) -> float:
    return minor / MINOR_UNITS_PER_MAJOR


def build_receipt(prefix: str, clock: Callable[[], float] = time.time) -> str:
    """Return `<prefix>-<epoch millis>`; two calls in one millisecond collide."""

    return f"{prefix}-{int(clock() * 1000)}"
