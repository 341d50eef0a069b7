"""
Wish Service Component Test Fixtures

Wires WishService to an in-memory registry, a pinned clock, and the shared
transfer/event-bus mocks.
"""

import pytest

from core.config.wish_config import WishServiceConfig
from microservices.wish_service.clock import FixedClock
from microservices.wish_service.wish_repository import WishRegistry
from microservices.wish_service.wish_service import WishService
from tests.contracts.wish.data_contract import (
    REFERENCE_END_TIMESTAMP,
    WishTestDataFactory,
)


@pytest.fixture
def data_factory():
    return WishTestDataFactory


@pytest.fixture
def clock() -> FixedClock:
    """Clock one tick before the shared test deadline"""
    return FixedClock(REFERENCE_END_TIMESTAMP - 1)


@pytest.fixture
def registry() -> WishRegistry:
    return WishRegistry()


@pytest.fixture
def wish_config() -> WishServiceConfig:
    return WishServiceConfig()


@pytest.fixture
def wish_service(registry, mock_transfer_client, clock, mock_event_bus, wish_config) -> WishService:
    return WishService(
        registry=registry,
        transfer_client=mock_transfer_client,
        clock=clock,
        event_bus=mock_event_bus,
        config=wish_config,
    )


@pytest.fixture
def alice(data_factory) -> str:
    return data_factory.make_account_id()


@pytest.fixture
def bob(data_factory) -> str:
    return data_factory.make_account_id()


@pytest.fixture
def charlie(data_factory) -> str:
    return data_factory.make_account_id()
