"""Main application entry point."""
import logging

import uvicorn

from deals.config import settings
from main import app

# Setup logger
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info(f"Server is running at {settings.HOST}:{settings.PORT}")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=logging.getLevelName(logging.getLogger().getEffectiveLevel()).lower(),
    )
