from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from stockplan.api.deps import get_client
from stockplan.core.errors import SERVICE_FAILURES
from stockplan.schemas.dto import Product
from stockplan.service.client import ManufacturingClient

router = APIRouter()


@router.get("", response_model=list[Product])
async def list_products(client: ManufacturingClient = Depends(get_client)) -> list[Product]:
    try:
        data = await client.products.list()
    except SERVICE_FAILURES as e:
        raise HTTPException(status_code=502, detail=str(e))
    return [Product.model_validate(p) for p in data or []]


@router.get("/{product_id}/composition")
async def get_composition(
    product_id: int, client: ManufacturingClient = Depends(get_client)
) -> list[dict[str, Any]]:
    try:
        records = await client.product_materials.list_by_product(product_id)
    except SERVICE_FAILURES as e:
        raise HTTPException(status_code=502, detail=str(e))
    return records if isinstance(records, list) else []
