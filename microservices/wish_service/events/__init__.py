"""
Wish Service Event Handling

Standard Structure:
- models.py: Event data models (Pydantic)
- publishers.py: Event publishers (publish events to other services)
"""

# Event Models
from .models import (
    WishCreatedEventData,
    WishEventType,
    WishSettledEventData,
    WishStreamConfig,
)

# Event Publishers
from .publishers import (
    publish_wish_created,
    publish_wish_settled,
)

__all__ = [
    # Event Publishers
    "publish_wish_created",
    "publish_wish_settled",
    # Event Models
    "WishCreatedEventData",
    "WishEventType",
    "WishSettledEventData",
    "WishStreamConfig",
]
