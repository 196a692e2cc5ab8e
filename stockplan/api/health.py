from fastapi import APIRouter

from stockplan.core.config import get_settings

router = APIRouter()


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "service": get_settings().API_BASE_URL}
