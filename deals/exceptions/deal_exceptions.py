"""Deal-related exceptions.

Every outcome of a rejected registry operation is one of these types. The
registry raises before mutating anything, so a caller that catches one of
them can rely on the registry being unchanged.
"""

from typing import Optional, Dict, Any
from .base_exceptions import BaseError

__all__ = [
    'DealError',
    'DealNotFoundError',
    'DealExpirationError',
    'DealSoldOutError',
    'DealAlreadyClaimedError',
    'InvalidDealDataError'
]

class DealError(BaseError):
    """Base exception for deal-related errors."""
    
    def __init__(
        self,
        message: str,
        deal_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.deal_id = deal_id
        self.details = details or {}
        
    def _get_details(self) -> Dict[str, Any]:
        return {
            'deal_id': self.deal_id,
            **self.details
        }

class DealNotFoundError(DealError):
    """Raised when a deal is not found."""
    
    def __init__(self, deal_id: str, message: str = "Deal not found"):
        super().__init__(message, deal_id)

class DealExpirationError(DealError):
    """Raised when a claim arrives after the deal's end time."""
    
    def __init__(self, deal_id: str, message: str = "Deal ended"):
        super().__init__(message, deal_id)

class DealSoldOutError(DealError):
    """Raised when every claim slot of a deal is taken."""
    
    def __init__(
        self,
        deal_id: str,
        item_count: int,
        claimed_count: int,
        message: str = "Deal is sold out"
    ):
        super().__init__(message, deal_id)
        self.item_count = item_count
        self.claimed_count = claimed_count
        
    def _get_details(self) -> Dict[str, Any]:
        details = super()._get_details()
        details['item_count'] = self.item_count
        details['claimed_count'] = self.claimed_count
        return details

class DealAlreadyClaimedError(DealError):
    """Raised when a user claims the same deal twice."""
    
    def __init__(
        self,
        deal_id: str,
        user_id: str,
        message: str = "User already claimed the deal"
    ):
        super().__init__(message, deal_id)
        self.user_id = user_id
        
    def _get_details(self) -> Dict[str, Any]:
        details = super()._get_details()
        details['user_id'] = self.user_id
        return details

class InvalidDealDataError(DealError):
    """Raised when deal data is invalid."""
    
    def __init__(
        self,
        message: str,
        deal_id: Optional[str] = None,
        validation_errors: Optional[Dict[str, str]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, deal_id, details)
        self.validation_errors = validation_errors or {}
        
    def _get_details(self) -> Dict[str, Any]:
        details = super()._get_details()
        details['validation_errors'] = self.validation_errors
        return details
