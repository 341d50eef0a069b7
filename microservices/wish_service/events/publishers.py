"""
Wish Event Publishers

Centralized event publishing functions for wish service.
Notifications are fire-and-forget: a failed publish is logged and reported
as False, it never fails the ledger operation that triggered it.
"""

import logging
from typing import List, Optional

from core.nats_client import Event, EventType, ServiceSource

from ..models import SettlementKind
from .models import (
    create_wish_created_event_data,
    create_wish_settled_event_data,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Event Publishers
# =============================================================================


async def publish_wish_created(event_bus, wish_id: int, owner: str) -> bool:
    """
    Publish wish.created event

    Args:
        event_bus: NATS event bus instance
        wish_id: Assigned wish id
        owner: Creating account

    Returns:
        True if event published successfully, False otherwise
    """
    if event_bus is None:
        return False

    try:
        event_data = create_wish_created_event_data(wish_id=wish_id, owner=owner)

        event = Event(
            event_type=EventType.WISH_CREATED,
            source=ServiceSource.WISH_SERVICE,
            data=event_data.model_dump(mode="json"),
        )

        result = await event_bus.publish_event(event)

        if result is False:
            logger.error(f"Failed to publish wish.created for wish {wish_id}")
            return False

        logger.info(f"Published wish.created for wish {wish_id}, owner {owner}")
        return True

    except Exception as e:
        logger.error(f"Error publishing wish.created event: {e}", exc_info=True)
        return False


async def publish_wish_settled(
    event_bus,
    wish_id: int,
    owner: str,
    kind: SettlementKind,
    total_worth: int,
    paid_out: int,
    failed_accounts: Optional[List[str]] = None,
    settled_by: Optional[str] = None,
) -> bool:
    """
    Publish wish.settled event

    Args:
        event_bus: NATS event bus instance
        wish_id: Settled wish id
        owner: Wish owner
        kind: Settlement path (claimed or split)
        total_worth: Value held in escrow at settlement
        paid_out: Sum of successful transfers
        failed_accounts: Accounts whose transfer failed (split only)
        settled_by: Caller that triggered settlement

    Returns:
        True if event published successfully, False otherwise
    """
    if event_bus is None:
        return False

    try:
        event_data = create_wish_settled_event_data(
            wish_id=wish_id,
            owner=owner,
            kind=kind,
            total_worth=total_worth,
            paid_out=paid_out,
            failed_accounts=failed_accounts,
            settled_by=settled_by,
        )

        event = Event(
            event_type=EventType.WISH_SETTLED,
            source=ServiceSource.WISH_SERVICE,
            data=event_data.model_dump(mode="json"),
        )

        result = await event_bus.publish_event(event)

        if result is False:
            logger.error(f"Failed to publish wish.settled for wish {wish_id}")
            return False

        logger.info(f"Published wish.settled ({kind.value}) for wish {wish_id}")
        return True

    except Exception as e:
        logger.error(f"Error publishing wish.settled event: {e}", exc_info=True)
        return False
