"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from rolegate.core.config import Settings
from rolegate.core.state import get_app_settings
from rolegate.schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def get_health(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """Return service status. Used by load balancers and monitoring."""
    return HealthResponse(status="ok", environment=settings.APP_ENV)
