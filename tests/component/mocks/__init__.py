"""
Component Test Mocks

Shared mock implementations for component testing.
These mocks replace real I/O dependencies (NATS, transfer service).
"""

from .nats_mock import MockEventBus
from .transfer_mock import MockTransferClient

__all__ = [
    'MockEventBus',
    'MockTransferClient',
]
