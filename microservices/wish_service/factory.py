"""
Wish Service Factory

Factory functions for creating service instances with real dependencies.
This is the ONLY place that imports I/O-dependent modules.

Usage:
    from .factory import create_wish_service
    service = create_wish_service(config, event_bus)
"""
from typing import Optional

from core.config.wish_config import WishServiceConfig
from core.logger import setup_service_logger

from .wish_repository import WishRegistry
from .wish_service import WishService


def create_wish_service(
    config: Optional[WishServiceConfig] = None,
    event_bus=None,
    transfer_client=None,
    clock=None,
    registry: Optional[WishRegistry] = None,
) -> WishService:
    """
    Create WishService with real dependencies.

    Use this in production, NOT in tests.

    Args:
        config: Wish service configuration (loaded from env if omitted)
        event_bus: Event bus for publishing events
        transfer_client: Transfer service for payouts (wallet service by default)
        clock: Time source (system clock by default)
        registry: Existing registry to serve (fresh one by default)

    Returns:
        Configured WishService instance
    """
    config = config or WishServiceConfig.from_env()
    setup_service_logger("microservices.wish_service")

    # Import real transfer client here (not at module level)
    if transfer_client is None:
        from .clients.wallet_client import WalletTransferClient
        transfer_client = WalletTransferClient(config=config)

    return WishService(
        registry=registry if registry is not None else create_wish_registry(),
        transfer_client=transfer_client,
        clock=clock,
        event_bus=event_bus,
        config=config,
    )


async def create_wish_service_with_events(
    config: Optional[WishServiceConfig] = None,
    **kwargs,
) -> WishService:
    """
    Create WishService and connect it to NATS when notifications are enabled.

    Args:
        config: Wish service configuration (loaded from env if omitted)
        **kwargs: Forwarded to create_wish_service

    Returns:
        Configured WishService instance
    """
    config = config or WishServiceConfig.from_env()
    event_bus = None
    if config.nats_enabled:
        from core.nats_client import get_event_bus
        event_bus = await get_event_bus("wish_service", config=config)

    return create_wish_service(config=config, event_bus=event_bus, **kwargs)


def create_wish_registry(next_id: int = 0) -> WishRegistry:
    """
    Create an empty WishRegistry.

    Args:
        next_id: Starting id counter

    Returns:
        WishRegistry instance
    """
    return WishRegistry(next_id=next_id)


__all__ = [
    "create_wish_service",
    "create_wish_service_with_events",
    "create_wish_registry",
]
