"""API v1 module."""

from .router import router, legacy_router

__all__ = ["router", "legacy_router"]
