"""Health check endpoints."""

import time
from typing import Any, Dict

from fastapi import APIRouter, Depends

from deals.config import Settings
from deals.dependencies import get_deal_registry, get_settings
from deals.services.deal_registry import DealRegistry

router = APIRouter()

STARTUP_TIME = time.time()

@router.get("")
async def health_check(
    registry: DealRegistry = Depends(get_deal_registry),
    settings: Settings = Depends(get_settings)
) -> Dict[str, Any]:
    """Health check endpoint.
    
    Returns:
        Dict with service health status:
        - status: always "healthy" while the process serves requests
        - version / environment: from settings
        - deals: number of live deals in the registry
        - uptime: seconds since the module was loaded
    """
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.APP_ENVIRONMENT,
        "deals": await registry.count(),
        "uptime": round(time.time() - STARTUP_TIME, 3)
    }
