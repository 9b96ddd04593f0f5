"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter

from app.core.config import get_settings
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return ok status with the running app version."""
    return HealthResponse(version=get_settings().app_version)
