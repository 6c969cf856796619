"""API v1 routers."""

from fastapi import APIRouter

from .policies import router as policies_router
from .screenings import router as screenings_router

# Create v1 router that includes all v1 endpoints
router = APIRouter(prefix="/v1")

router.include_router(policies_router)
router.include_router(screenings_router)

__all__ = ["router", "policies_router", "screenings_router"]
