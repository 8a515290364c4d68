"""In-memory deal registry.

The registry owns every live deal and serializes all operations on them
through one ``asyncio.Lock``. Each operation holds the lock for its whole
body and returns a detached snapshot, so concurrent claims against the same
deal are totally ordered by lock acquisition and callers never observe a
partially applied change.
"""

import asyncio
from datetime import datetime
from typing import Callable, Dict, Optional
from uuid import uuid4

from deals.exceptions import (
    DealNotFoundError,
    DealExpirationError,
    DealSoldOutError,
    DealAlreadyClaimedError,
    InvalidDealDataError
)
from deals.models.deal import Deal
from deals.logger import get_logger
from deals.utils.time import ensure_utc, utc_now

logger = get_logger("services.deal_registry")

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def generate_deal_id() -> str:
    """Generate a random deal id."""
    return uuid4().hex


class DealRegistry:
    """Registry of live deals keyed by id."""

    def __init__(
        self,
        clock: Optional[Clock] = None,
        id_factory: Optional[IdFactory] = None,
        strict_validation: bool = False
    ):
        """Initialize registry.

        Args:
            clock: Returns the current time; defaults to aware UTC now
            id_factory: Returns a candidate id for a new deal
            strict_validation: Reject negative item counts and past end times
        """
        self._deals: Dict[str, Deal] = {}
        self._lock = asyncio.Lock()
        self._clock = clock or utc_now
        self._id_factory = id_factory or generate_deal_id
        self.strict_validation = strict_validation

    async def create_deal(self, item_count: int, price: float, end_time: datetime) -> Deal:
        """Register a new deal with no claims."""
        end_time = ensure_utc(end_time)
        async with self._lock:
            if self.strict_validation:
                self._validate(item_count, end_time)

            deal_id = self._id_factory()
            while deal_id in self._deals:
                logger.warning(f"Generated deal id {deal_id} is already in use, regenerating")
                deal_id = self._id_factory()

            deal = Deal(
                id=deal_id,
                item_count=item_count,
                price=price,
                end_time=end_time
            )
            self._deals[deal_id] = deal
            logger.info(f"Created deal {deal_id} with {item_count} items ending at {end_time.isoformat()}")
            return deal.snapshot()

    async def update_deal(self, deal_id: str, item_count: int, end_time: datetime) -> Deal:
        """Replace a deal's item count and end time.

        Claim state is left as is, even when the new item count is below the
        number of claims already granted.
        """
        end_time = ensure_utc(end_time)
        async with self._lock:
            deal = self._get(deal_id)
            if self.strict_validation:
                self._validate(item_count, end_time, deal_id)

            deal.item_count = item_count
            deal.end_time = end_time
            logger.debug(f"Updated deal {deal_id}: items={item_count} end_time={end_time.isoformat()}")
            return deal.snapshot()

    async def claim_deal(self, deal_id: str, user_id: str) -> Deal:
        """Claim one slot of a deal for a user.

        Checks run in a fixed order and the first failing one is raised:
        unknown deal, expired, sold out, already claimed by this user.
        """
        async with self._lock:
            deal = self._get(deal_id)

            if deal.is_expired(self._clock()):
                logger.info(f"Rejected claim on deal {deal_id} by {user_id}: expired")
                raise DealExpirationError(deal_id)

            if deal.is_sold_out():
                logger.info(f"Rejected claim on deal {deal_id} by {user_id}: sold out")
                raise DealSoldOutError(deal_id, deal.item_count, deal.claimed_count)

            if deal.has_claimed(user_id):
                logger.info(f"Rejected claim on deal {deal_id} by {user_id}: already claimed")
                raise DealAlreadyClaimedError(deal_id, user_id)

            deal.claimed_count += 1
            deal.claimants.add(user_id)
            logger.debug(f"User {user_id} claimed deal {deal_id} ({deal.claimed_count}/{deal.item_count})")
            return deal.snapshot()

    async def end_deal(self, deal_id: str) -> Deal:
        """Remove a deal and return its final state."""
        async with self._lock:
            deal = self._get(deal_id)
            del self._deals[deal_id]
            logger.info(f"Ended deal {deal_id} with {deal.claimed_count}/{deal.item_count} claimed")
            return deal

    async def count(self) -> int:
        """Number of live deals."""
        async with self._lock:
            return len(self._deals)

    def _get(self, deal_id: str) -> Deal:
        # Caller must hold the lock.
        deal = self._deals.get(deal_id)
        if deal is None:
            raise DealNotFoundError(deal_id)
        return deal

    def _validate(self, item_count: int, end_time: datetime, deal_id: Optional[str] = None) -> None:
        errors = {}
        if item_count < 0:
            errors['item_count'] = "must not be negative"
        if end_time < self._clock():
            errors['end_time'] = "must not be in the past"
        if errors:
            raise InvalidDealDataError(
                "Invalid deal data",
                deal_id=deal_id,
                validation_errors=errors
            )
