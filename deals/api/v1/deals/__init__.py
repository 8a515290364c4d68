"""Deals API package."""

from .router import router, legacy_router

__all__ = ["router", "legacy_router"]
