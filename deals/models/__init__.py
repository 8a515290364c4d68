"""Models package."""

from .deal import Deal, DealCreate, DealUpdate, DealResponse

__all__ = ['Deal', 'DealCreate', 'DealUpdate', 'DealResponse']
