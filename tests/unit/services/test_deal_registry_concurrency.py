"""Concurrency tests for the deal registry."""

import asyncio
from datetime import timedelta

import pytest

from deals.exceptions import DealAlreadyClaimedError, DealNotFoundError, DealSoldOutError
from deals.services.deal_registry import DealRegistry
from tests.conftest import NOW


@pytest.mark.asyncio
class TestConcurrentClaims:
    """Racing claims must be settled by lock order alone."""

    @pytest.mark.parametrize("slots, claimants", [(1, 2), (10, 50), (25, 100)])
    async def test_exactly_k_of_n_claims_succeed(self, registry: DealRegistry, slots: int, claimants: int):
        deal = await registry.create_deal(item_count=slots, price=1.0, end_time=NOW + timedelta(hours=1))

        results = await asyncio.gather(
            *(registry.claim_deal(deal.id, f"user-{i}") for i in range(claimants)),
            return_exceptions=True
        )

        succeeded = [r for r in results if not isinstance(r, Exception)]
        sold_out = [r for r in results if isinstance(r, DealSoldOutError)]
        assert len(succeeded) == slots
        assert len(sold_out) == claimants - slots

        # Every success saw a distinct, increasing claim count
        assert sorted(r.claimed_count for r in succeeded) == list(range(1, slots + 1))

        final = await registry.end_deal(deal.id)
        assert final.claimed_count == slots
        assert len(final.claimants) == slots

    async def test_same_user_racing_claims_once(self, registry: DealRegistry):
        deal = await registry.create_deal(item_count=5, price=1.0, end_time=NOW + timedelta(hours=1))

        results = await asyncio.gather(
            *(registry.claim_deal(deal.id, "user-a") for _ in range(20)),
            return_exceptions=True
        )

        succeeded = [r for r in results if not isinstance(r, Exception)]
        assert len(succeeded) == 1
        assert all(
            isinstance(r, DealAlreadyClaimedError)
            for r in results if isinstance(r, Exception)
        )

    async def test_concurrent_creates_get_unique_ids(self, registry: DealRegistry):
        deals = await asyncio.gather(
            *(registry.create_deal(item_count=1, price=1.0, end_time=NOW) for _ in range(200))
        )

        assert len({deal.id for deal in deals}) == 200
        assert await registry.count() == 200

    async def test_claims_interleaved_with_update(self, registry: DealRegistry):
        deal = await registry.create_deal(item_count=3, price=1.0, end_time=NOW + timedelta(hours=1))

        operations = [registry.claim_deal(deal.id, f"user-{i}") for i in range(10)]
        operations.insert(5, registry.update_deal(deal.id, item_count=6, end_time=NOW + timedelta(hours=1)))
        await asyncio.gather(*operations, return_exceptions=True)

        final = await registry.end_deal(deal.id)
        assert final.item_count == 6
        assert final.claimed_count <= final.item_count
        assert final.claimed_count == len(final.claimants)


async def _run_while_locked(registry: DealRegistry, operation):
    """Start ``operation`` while the registry lock is held elsewhere.

    Returns the task once the lock has been released again; the caller
    awaits it for the result.
    """
    await registry._lock.acquire()
    try:
        task = asyncio.create_task(operation)
        for _ in range(5):
            await asyncio.sleep(0)
        assert not task.done()
    finally:
        registry._lock.release()
    return task


@pytest.mark.asyncio
class TestOperationsWaitForLock:
    """Every operation runs entirely under the registry lock."""

    async def test_claim_waits_for_lock(self, registry: DealRegistry):
        deal = await registry.create_deal(item_count=1, price=1.0, end_time=NOW + timedelta(hours=1))

        task = await _run_while_locked(registry, registry.claim_deal(deal.id, "user-a"))
        assert registry._deals[deal.id].claimed_count == 0

        claimed = await task
        assert claimed.claimed_count == 1

    async def test_create_waits_for_lock(self, registry: DealRegistry):
        task = await _run_while_locked(
            registry,
            registry.create_deal(item_count=1, price=1.0, end_time=NOW + timedelta(hours=1))
        )
        assert registry._deals == {}

        deal = await task
        assert deal.id in registry._deals

    async def test_update_waits_for_lock(self, registry: DealRegistry):
        deal = await registry.create_deal(item_count=1, price=1.0, end_time=NOW + timedelta(hours=1))

        task = await _run_while_locked(
            registry,
            registry.update_deal(deal.id, item_count=9, end_time=NOW + timedelta(hours=2))
        )
        assert registry._deals[deal.id].item_count == 1

        updated = await task
        assert updated.item_count == 9

    async def test_end_waits_for_lock(self, registry: DealRegistry):
        deal = await registry.create_deal(item_count=1, price=1.0, end_time=NOW + timedelta(hours=1))

        task = await _run_while_locked(registry, registry.end_deal(deal.id))
        assert deal.id in registry._deals

        ended = await task
        assert ended.id == deal.id
        assert deal.id not in registry._deals

    async def test_rejected_claim_releases_lock(self, registry: DealRegistry):
        with pytest.raises(DealNotFoundError):
            await registry.claim_deal("missing", "user-a")

        assert not registry._lock.locked()
