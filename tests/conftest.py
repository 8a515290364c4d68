"""Test configuration module."""

from datetime import datetime, timedelta, timezone
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from deals.config import Settings
from deals.dependencies import get_deal_registry
from deals.services.deal_registry import DealRegistry
from main import create_app

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FrozenClock:
    """Create a clock frozen at NOW."""
    return FrozenClock(NOW)


@pytest.fixture
def registry(clock: FrozenClock) -> DealRegistry:
    """Create an empty registry driven by the frozen clock."""
    return DealRegistry(clock=clock)


@pytest.fixture
def strict_registry(clock: FrozenClock) -> DealRegistry:
    """Create an empty registry with strict validation enabled."""
    return DealRegistry(clock=clock, strict_validation=True)


@pytest.fixture
def test_settings() -> Settings:
    """Create settings for testing."""
    return Settings(
        APP_NAME="Flash Deals Test",
        APP_ENVIRONMENT="test",
        TESTING=True,
        ENABLE_LEGACY_ROUTES=True,
    )


@pytest.fixture
def app(test_settings: Settings, registry: DealRegistry) -> FastAPI:
    """Create an application wired to the test registry."""
    app = create_app(test_settings)
    app.dependency_overrides[get_deal_registry] = lambda: registry
    return app


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Create a test client that runs the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client


def iso(dt: datetime) -> str:
    """Format a datetime the way clients send it."""
    return dt.isoformat()
