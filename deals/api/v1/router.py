"""Main API router module."""

from fastapi import APIRouter

from .deals.router import router as deals_router, legacy_router
from .health.router import router as health_router

router = APIRouter()

# Core routes
router.include_router(deals_router, prefix="/deals", tags=["Deals"])

# System routes
router.include_router(health_router, prefix="/health", tags=["System"])

__all__ = ["router", "legacy_router"]
