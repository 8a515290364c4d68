"""Services initialization."""

from .deal_registry import DealRegistry, generate_deal_id

__all__ = [
    'DealRegistry',
    'generate_deal_id'
]
