"""Production suggestion: response normalization, ranking and totals."""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Mapping

from stockplan.normalize.quantity import to_number
from stockplan.schemas.dto import ProductionEntry, ProductionPlan

logger = logging.getLogger(__name__)


def _first(item: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = item.get(key)
        if value is not None:
            return value
    return None


def _text(value: Any) -> str | None:
    return None if value is None else str(value)


def _to_entry(item: Mapping[str, Any], *, derive_subtotal: bool) -> ProductionEntry:
    quantity = to_number(_first(item, "producibleQuantity", "quantity"))
    unit_value = to_number(_first(item, "productValue", "unitValue"))

    raw_subtotal = item.get("subtotal")
    if raw_subtotal is None and derive_subtotal:
        subtotal = unit_value * quantity
    else:
        subtotal = to_number(raw_subtotal)

    return ProductionEntry(
        product_id=item.get("productId"),
        code=_text(_first(item, "productCode", "code")),
        name=_text(_first(item, "productName", "name")),
        quantity=quantity,
        unit_value=unit_value,
        subtotal=subtotal,
    )


def normalize_production_response(data: Any) -> list[ProductionEntry]:
    """Entries from either a bare list or a ``{"products": [...]}`` envelope.

    Only the bare-list shape derives a missing subtotal from unit value and
    quantity; the envelope shape defaults it to 0. Anything else gives ``[]``.
    """
    if isinstance(data, list):
        items, derive = data, True
    elif isinstance(data, Mapping) and isinstance(data.get("products"), list):
        items, derive = data["products"], False
    else:
        logger.warning("Unrecognized production suggestion shape: %s", type(data).__name__)
        return []
    return [_to_entry(it, derive_subtotal=derive) for it in items if isinstance(it, Mapping)]


def reported_total(data: Any) -> float | None:
    """Total value precomputed by the service, if the envelope carries one."""
    if not isinstance(data, Mapping):
        return None
    total = data.get("totalValue")
    if isinstance(total, bool) or not isinstance(total, (int, float)):
        return None
    try:
        total = float(total)
    except OverflowError:
        return None
    return total if math.isfinite(total) else None


def rank_entries(entries: Iterable[ProductionEntry]) -> list[ProductionEntry]:
    """Highest unit value first; ties keep their incoming order."""
    return sorted(entries, key=lambda e: e.unit_value, reverse=True)


def build_plan(data: Any) -> ProductionPlan:
    entries = rank_entries(normalize_production_response(data))
    return ProductionPlan(entries=entries, reported_total=reported_total(data))
