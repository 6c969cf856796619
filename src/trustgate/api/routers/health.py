"""Health check endpoints."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from trustgate.api.dependencies import get_provider
from trustgate.api.schemas.health import HealthResponse, HealthStatus
from trustgate.providers.protocol import ScreeningProvider

router = APIRouter(tags=["health"])

APP_VERSION = "0.1.0"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Basic health check",
    description="Returns liveness status and the active screening provider.",
)
async def health_check(
    provider: Annotated[ScreeningProvider, Depends(get_provider)],
) -> HealthResponse:
    """Basic liveness check endpoint."""
    return HealthResponse(
        status=HealthStatus.HEALTHY,
        version=APP_VERSION,
        provider=provider.provider_id,
        timestamp=datetime.now(UTC),
    )
