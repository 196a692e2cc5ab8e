from fastapi import APIRouter, Depends, HTTPException

from stockplan.api.deps import get_client
from stockplan.schemas.dto import ProductionPlan
from stockplan.service.client import ManufacturingClient
from stockplan.views.production import ProductionView, ViewState

router = APIRouter()


@router.get("", response_model=ProductionPlan)
async def get_production_plan(client: ManufacturingClient = Depends(get_client)) -> ProductionPlan:
    view = ProductionView(client)
    plan = await view.load()
    if view.state is ViewState.FAILED:
        raise HTTPException(status_code=502, detail=view.error)
    return plan
