"""
Wish Service Event Models

Event data models for the wish lifecycle.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import SettlementKind

# =============================================================================
# Event Type Definitions (Service-Specific)
# =============================================================================

class WishEventType(str, Enum):
    """
    Events published by wish_service.

    Stream: wish-stream
    Subjects: wish.>
    """
    WISH_CREATED = "wish.created"
    WISH_SETTLED = "wish.settled"


class WishStreamConfig:
    """Stream configuration for wish_service"""
    STREAM_NAME = "wish-stream"
    SUBJECTS = ["wish.>"]
    MAX_MESSAGES = 100000
    CONSUMER_PREFIX = "wish"


# ============================================================================
# Wish Lifecycle Event Models
# ============================================================================


class WishCreatedEventData(BaseModel):
    """
    Event: wish.created
    Triggered when a wish is registered
    """

    wish_id: int = Field(..., description="Assigned wish id")
    owner: str = Field(..., description="Creating account")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class WishSettledEventData(BaseModel):
    """
    Event: wish.settled
    Triggered when a wish is claimed by its owner or split among contributors
    """

    wish_id: int = Field(..., description="Settled wish id")
    owner: str = Field(..., description="Wish owner")
    kind: SettlementKind = Field(..., description="claimed or split")
    total_worth: int = Field(..., description="Value held in escrow at settlement")
    paid_out: int = Field(..., description="Sum of successful transfers")
    failed_accounts: List[str] = Field(default_factory=list, description="Accounts whose transfer failed")
    settled_by: Optional[str] = Field(None, description="Caller that triggered settlement")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# ============================================================================
# Factory Functions
# ============================================================================


def create_wish_created_event_data(wish_id: int, owner: str) -> WishCreatedEventData:
    """Create wish created event data"""
    return WishCreatedEventData(wish_id=wish_id, owner=owner)


def create_wish_settled_event_data(
    wish_id: int,
    owner: str,
    kind: SettlementKind,
    total_worth: int,
    paid_out: int,
    failed_accounts: Optional[List[str]] = None,
    settled_by: Optional[str] = None,
) -> WishSettledEventData:
    """Create wish settled event data"""
    return WishSettledEventData(
        wish_id=wish_id,
        owner=owner,
        kind=kind,
        total_worth=total_worth,
        paid_out=paid_out,
        failed_accounts=failed_accounts or [],
        settled_by=settled_by,
    )
