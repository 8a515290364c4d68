"""Logging configuration module.

Provides the ``deals`` logger shared by the registry and the API routers.
Module loggers are children named ``deals.<area>``.
"""

import logging
import sys
from typing import Dict, Any
from deals.config import get_settings

settings = get_settings()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logger() -> logging.Logger:
    """Attach a stdout handler to the ``deals`` logger once."""
    logger = logging.getLogger("deals")
    logger.setLevel(settings.LOG_LEVEL)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    # Root handlers would print every record a second time
    logger.propagate = False
    return logger

# Create logger instance
logger = setup_logger()

def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(f"deals.{name}")

def log_error(error: Exception, context: Dict[str, Any] = None) -> None:
    """Log an error with optional request context."""
    error_data = {
        "error_type": type(error).__name__,
        "error_message": str(error),
    }
    if context:
        error_data.update(context)
    logger.error("Error occurred", extra=error_data, exc_info=error)

__all__ = ["logger", "get_logger", "log_error", "setup_logger"]
