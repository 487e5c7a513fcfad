"""API v1 router configuration."""

from fastapi import APIRouter

from lendermatch.api.v1.endpoints import health, matching

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    matching.router,
    prefix="/matching",
    tags=["matching"],
)
