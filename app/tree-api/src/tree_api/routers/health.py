from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from tree_api.services import healthService


router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    catalog: str

@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return API liveness and catalog source status."""
    try:
        catalog_status = healthService.health_check()
    except Exception as exc:
        raise HTTPException(status_code=503, detail=f"Catalog unavailable: {exc}") from exc
    return HealthResponse(status="ok", catalog=catalog_status)
