from fastapi import APIRouter, Depends, HTTPException

from stockplan.api.deps import get_client
from stockplan.core.errors import SERVICE_FAILURES
from stockplan.schemas.dto import RawMaterial
from stockplan.service.client import ManufacturingClient

router = APIRouter()


@router.get("", response_model=list[RawMaterial])
async def list_raw_materials(client: ManufacturingClient = Depends(get_client)) -> list[RawMaterial]:
    try:
        data = await client.raw_materials.list()
    except SERVICE_FAILURES as e:
        raise HTTPException(status_code=502, detail=str(e))
    return [RawMaterial.model_validate(m) for m in data or []]
