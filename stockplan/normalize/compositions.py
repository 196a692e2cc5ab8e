"""Canonical shape for product/raw-material composition records.

The manufacturing service has used several spellings for the same fields over
time (``materialId`` vs ``rawMaterialId``, ``quantity`` vs ``requiredQuantity``
vs ``quantityRequired``, nested ``product``/``rawMaterial`` objects). Everything
here folds those spellings into one shape. Resolution order per field:

- productId        <- productId, product.id
- rawMaterialId    <- rawMaterialId, materialId, rawMaterial.id
- requiredQuantity <- requiredQuantity, quantityRequired, quantity (parsed)

Responses additionally get:

- quantityRequired <- the resolved requiredQuantity
- rawMaterialCode  <- rawMaterialCode, materialCode, rawMaterial.code
- rawMaterialName  <- rawMaterialName, materialName, rawMaterial.name

A field is only added when it resolves to a value; original keys are kept.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from stockplan.normalize.quantity import parse_quantity


def _first(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def _nested(record: Mapping[str, Any], key: str, field: str) -> Any:
    inner = record.get(key)
    if isinstance(inner, Mapping):
        return inner.get(field)
    return None


def _resolve_core(record: Mapping[str, Any]) -> dict[str, Any]:
    product_id = _first(record, "productId")
    if product_id is None:
        product_id = _nested(record, "product", "id")

    raw_material_id = _first(record, "rawMaterialId", "materialId")
    if raw_material_id is None:
        raw_material_id = _nested(record, "rawMaterial", "id")

    required_quantity = parse_quantity(
        _first(record, "requiredQuantity", "quantityRequired", "quantity")
    )
    return {
        "productId": product_id,
        "rawMaterialId": raw_material_id,
        "requiredQuantity": required_quantity,
    }


def _merge(record: Mapping[str, Any], resolved: Mapping[str, Any]) -> dict[str, Any]:
    out = dict(record)
    out.update({k: v for k, v in resolved.items() if v is not None})
    return out


def canonicalize_payload(payload: Any) -> Any:
    """Canonical request body for a composition record. Non-dicts pass through."""
    if not isinstance(payload, Mapping):
        return payload
    return _merge(payload, _resolve_core(payload))


def canonicalize_response(item: Any) -> Any:
    """Canonical composition record as returned by the service."""
    if not isinstance(item, Mapping):
        return item

    resolved = _resolve_core(item)
    resolved["quantityRequired"] = resolved["requiredQuantity"]

    code = _first(item, "rawMaterialCode", "materialCode")
    if code is None:
        code = _nested(item, "rawMaterial", "code")
    name = _first(item, "rawMaterialName", "materialName")
    if name is None:
        name = _nested(item, "rawMaterial", "name")
    resolved["rawMaterialCode"] = code
    resolved["rawMaterialName"] = name

    return _merge(item, resolved)


def numeric_id(value: Any) -> float | None:
    """Identifier as a number so ``"3"`` and ``3`` compare equal."""
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            return float(value.strip())
    except (ValueError, OverflowError):
        return None
    return None


def filter_by_product(records: Any, product_id: Any) -> Any:
    """Keep only the records belonging to ``product_id``."""
    if not isinstance(records, list):
        return records
    wanted = numeric_id(product_id)
    if wanted is None:
        return []
    return [
        r for r in records
        if isinstance(r, Mapping) and numeric_id(r.get("productId")) == wanted
    ]


def index_by_id(items: Iterable[Any]) -> dict[float, Any]:
    index: dict[float, Any] = {}
    for item in items:
        if not isinstance(item, Mapping):
            continue
        key = numeric_id(item.get("id"))
        if key is not None:
            index[key] = item
    return index


def join_raw_material_details(records: Any, raw_materials: Any) -> Any:
    """Fill in rawMaterialCode/rawMaterialName from the raw-material catalogue.

    Records that already carry a code or name keep it. Records whose material
    is not in the catalogue come back as they were.
    """
    if not isinstance(records, list) or not isinstance(raw_materials, list):
        return records

    by_id = index_by_id(raw_materials)

    joined: list[Any] = []
    for record in records:
        if not isinstance(record, Mapping):
            joined.append(record)
            continue
        out = dict(record)
        key = numeric_id(record.get("rawMaterialId"))
        material = by_id.get(key) if key is not None else None
        if material is not None:
            if out.get("rawMaterialCode") is None and material.get("code") is not None:
                out["rawMaterialCode"] = material["code"]
            if out.get("rawMaterialName") is None and material.get("name") is not None:
                out["rawMaterialName"] = material["name"]
        joined.append(out)
    return joined
