"""Application exceptions."""

from .base_exceptions import BaseError
from .deal_exceptions import (
    DealError,
    DealNotFoundError,
    DealExpirationError,
    DealSoldOutError,
    DealAlreadyClaimedError,
    InvalidDealDataError
)

__all__ = [
    'BaseError',
    'DealError',
    'DealNotFoundError',
    'DealExpirationError',
    'DealSoldOutError',
    'DealAlreadyClaimedError',
    'InvalidDealDataError'
]
