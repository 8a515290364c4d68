"""FastAPI dependencies."""

from fastapi import Request

from deals.config import settings, Settings
from deals.services.deal_registry import DealRegistry

def get_deal_registry(request: Request) -> DealRegistry:
    """Get the process-wide deal registry created at startup."""
    return request.app.state.deal_registry

def get_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return getattr(request.app.state, "settings", settings)
