"""
NATS Client for Python Microservices
Provides event-driven communication for the wish service

Events are JSON-encoded and published on a subject equal to the event type
(e.g. "wish.created"). Publishing is fire-and-forget from the caller's point
of view: failures are logged and reported as False, never raised.
"""

import json
import logging
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

import nats
from nats.aio.client import Client as NATS

from core.config.wish_config import WishServiceConfig

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Event types published by the wish service"""

    WISH_CREATED = "wish.created"
    WISH_SETTLED = "wish.settled"


class ServiceSource(Enum):
    """Service sources"""

    WISH_SERVICE = "wish_service"
    WALLET_SERVICE = "wallet_service"


class Event:
    """Event model"""

    def __init__(
        self,
        event_type: EventType,
        source: ServiceSource,
        data: Dict[str, Any],
        subject: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
    ):
        self.id = str(uuid.uuid4())
        self.type = event_type.value
        self.source = source.value
        self.data = data
        self.subject = subject
        self.timestamp = datetime.now(timezone.utc).isoformat()
        self.metadata = metadata or {}
        self.version = "1.0.0"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "source": self.source,
            "subject": self.subject,
            "timestamp": self.timestamp,
            "data": self.data,
            "metadata": self.metadata,
            "version": self.version,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Event":
        event = cls.__new__(cls)
        event.id = data.get("id")
        event.type = data.get("type")
        event.source = data.get("source")
        event.subject = data.get("subject")
        event.timestamp = data.get("timestamp")
        event.data = data.get("data", {})
        event.metadata = data.get("metadata", {})
        event.version = data.get("version", "1.0.0")
        return event


class NATSEventBus:
    """NATS event bus backed by nats-py"""

    def __init__(self, service_name: str, url: str = "nats://localhost:4222"):
        """
        Initialize NATS Event Bus.

        Args:
            service_name: Name of the publishing service (used as client name)
            url: NATS server URL
        """
        self.service_name = service_name
        self.url = url
        self._client: Optional[NATS] = None
        self._is_connected = False

        logger.info(f"NATS EventBus initialized: {self.url}")

    @property
    def is_connected(self) -> bool:
        return self._is_connected

    async def connect(self):
        """Connect to the NATS server"""
        try:
            self._client = await nats.connect(self.url, name=self.service_name)
            self._is_connected = True
            logger.info(f"Connected to NATS as {self.service_name}")
        except Exception as e:
            logger.error(f"Failed to connect to NATS at {self.url}: {e}")
            raise

    async def publish_event(self, event: Event) -> bool:
        """Publish an event on the subject named after its type"""
        if not self._is_connected or not self._client:
            logger.error("Not connected to NATS")
            return False

        try:
            subject = event.subject or event.type
            data = json.dumps(event.to_dict()).encode()
            await self._client.publish(subject, data)
            logger.info(f"Published event {event.type} [{event.id}] on {subject}")
            return True
        except Exception as e:
            logger.error(f"Error publishing event {event.id}: {e}")
            return False

    async def close(self):
        """Drain and close the NATS connection"""
        if self._client:
            await self._client.drain()
            self._client = None
        self._is_connected = False


_event_bus: Optional[NATSEventBus] = None


async def get_event_bus(
    service_name: str,
    config: Optional[WishServiceConfig] = None,
) -> NATSEventBus:
    """
    Get or create event bus instance.

    Args:
        service_name: Name of the service using the event bus
        config: Wish service configuration (for the NATS URL)

    Returns:
        NATSEventBus instance
    """
    global _event_bus

    if _event_bus is None:
        config = config or WishServiceConfig.from_env()
        _event_bus = NATSEventBus(service_name=service_name, url=config.nats_url)
        await _event_bus.connect()

    return _event_bus


__all__ = [
    "Event",
    "EventType",
    "ServiceSource",
    "NATSEventBus",
    "get_event_bus",
]
