"""Main application module.

This module sets up the FastAPI application and its dependencies.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from deals.config import settings as default_settings, Settings
from deals.api.v1 import router as api_router, legacy_router
from deals.logger import LOG_FORMAT, log_error
from deals.services.deal_registry import DealRegistry

def setup_logging(settings: Settings) -> None:
    """Set up root logging for the process."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )

    # Configure module-specific log levels
    loggers = {
        'asyncio': logging.WARNING,
        'fastapi': logging.INFO,
        'uvicorn': logging.INFO,
        'uvicorn.access': logging.WARNING,
    }

    for logger_name, level in loggers.items():
        logging.getLogger(logger_name).setLevel(level)

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan setup and cleanup.
    
    Builds the deal registry shared by every request handler.
    """
    settings = app.state.settings
    app.state.deal_registry = DealRegistry(
        strict_validation=settings.STRICT_DEAL_VALIDATION
    )
    logger.info(
        f"Deal registry ready (strict validation: {settings.STRICT_DEAL_VALIDATION}), "
        f"environment: {settings.APP_ENVIRONMENT}"
    )
    yield
    logger.info(f"Shutting down with {await app.state.deal_registry.count()} live deals")

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or default_settings

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Time-bounded promotional deals with limited claims",
        docs_url="/docs" if not settings.TESTING else None,
        redoc_url="/redoc" if not settings.TESTING else None,
        redirect_slashes=False,
        lifespan=lifespan
    )
    app.state.settings = settings

    # Include routers
    app.include_router(api_router, prefix=settings.API_V1_PREFIX)
    if settings.ENABLE_LEGACY_ROUTES:
        app.include_router(legacy_router, tags=["Deals (legacy)"])

    @app.get("/")
    async def root():
        """Root endpoint with basic service information."""
        return {
            "status": "ok",
            "message": f"{settings.APP_NAME} API is running",
            "version": settings.APP_VERSION,
            "environment": settings.APP_ENVIRONMENT
        }

    # Global exception handler for unhandled exceptions
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler to catch and log unhandled exceptions."""
        log_error(exc, {"method": request.method, "path": request.url.path})
        
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred. Please try again later."},
        )

    return app

setup_logging(default_settings)
app = create_app()
