"""Base exceptions for the application."""

from typing import Dict, Any
from datetime import datetime, timezone

class BaseError(Exception):
    """Base exception class for all application exceptions."""
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.timestamp = datetime.now(timezone.utc)
        
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            'error': self.__class__.__name__,
            'message': self.message,
            'timestamp': self.timestamp.isoformat(),
            'details': self._get_details()
        }
        
    def _get_details(self) -> Dict[str, Any]:
        """Get additional error details. Override in subclasses."""
        return {}

__all__ = ['BaseError']
