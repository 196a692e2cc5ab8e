"""Adapters for the historical calling conventions of composition operations.

The service moved from material-centric to association-centric addressing, and
callers written against each generation are still around. These helpers take
whatever arguments were passed and reduce them to one canonical call:

create
    (payload) | (product_id, payload) | (product_id, raw_material_id, quantity)
update
    (association_id, payload) | (_, association_id, payload)
    | (_, association_id, product_id, raw_material_id[, quantity])
delete
    (association_id) | (_, association_id)
"""

from __future__ import annotations

from typing import Any, Mapping, NamedTuple

from stockplan.normalize.compositions import canonicalize_payload


class UpdateCall(NamedTuple):
    association_id: Any
    payload: Any


def _assemble(product_id: Any, raw_material_id: Any, required_quantity: Any) -> dict[str, Any]:
    fields = {
        "productId": product_id,
        "rawMaterialId": raw_material_id,
        "requiredQuantity": required_quantity,
    }
    return {k: v for k, v in fields.items() if v is not None}


def normalize_create_args(*args: Any) -> Any:
    """Canonical request body for creating a composition record."""
    if len(args) >= 3:
        return canonicalize_payload(_assemble(args[0], args[1], args[2]))
    if len(args) == 2 and isinstance(args[1], Mapping):
        product_id, payload = args
        return canonicalize_payload({"productId": product_id, **payload})
    if len(args) == 1 and isinstance(args[0], Mapping):
        return canonicalize_payload(args[0])
    return {}


def normalize_update_args(*args: Any) -> UpdateCall:
    """Association id and canonical body for updating a composition record."""
    if len(args) == 2 and isinstance(args[1], Mapping):
        return UpdateCall(args[0], canonicalize_payload(args[1]))
    if len(args) >= 3 and isinstance(args[2], Mapping):
        return UpdateCall(args[1], canonicalize_payload(args[2]))
    if len(args) >= 4:
        quantity = args[4] if len(args) >= 5 else None
        return UpdateCall(args[1], canonicalize_payload(_assemble(args[2], args[3], quantity)))

    association_id = args[0] if args else None
    payload = args[1] if len(args) > 1 else {}
    return UpdateCall(association_id, canonicalize_payload(payload))


def normalize_delete_args(*args: Any) -> Any:
    """Association id to delete; a leading legacy argument is ignored."""
    if len(args) == 1:
        return args[0]
    return args[1] if len(args) > 1 else None
