"""Lenient parsing of user-entered and service-sent quantities."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any


def parse_quantity(value: Any) -> Any:
    """Return ``value`` as a float when it reads as a number, else unchanged.

    Strings may use a comma as decimal separator (``"12,5"`` -> ``12.5``).
    Numbers and every other type pass through untouched. Never raises.
    """
    if isinstance(value, str):
        normalized = value.strip().replace(",", ".", 1)
        # float() would also accept "1_000"
        if not normalized or "_" in normalized:
            return value
        try:
            parsed = float(normalized)
        except ValueError:
            return value
        return parsed if math.isfinite(parsed) else value
    return value


def to_number(value: Any, default: float = 0.0) -> float:
    """Coerce a service field to float; missing or unreadable values give ``default``."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float, Decimal)):
        try:
            return float(value)
        except OverflowError:
            # ints past float range
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return default
        try:
            return float(stripped)
        except ValueError:
            return default
    return default
