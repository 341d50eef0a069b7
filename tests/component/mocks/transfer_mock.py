"""
Transfer Service Mock for Component Testing

Records payouts instead of moving value. Individual destinations can be
made to fail, and a hook can run inside a transfer to simulate a
collaborator calling back into the service.
"""
from typing import Awaitable, Callable, List, Optional, Set, Tuple


class MockTransferClient:
    """Mock implementation of TransferClientProtocol"""

    def __init__(self):
        self.transfers: List[Tuple[str, int]] = []
        self.attempts: List[Tuple[str, int]] = []
        self._failing: Set[str] = set()
        self._should_raise: Optional[Exception] = None
        self.on_transfer: Optional[Callable[[str, int], Awaitable[None]]] = None

    async def transfer(self, destination: str, amount: int) -> bool:
        self.attempts.append((destination, amount))

        if self.on_transfer is not None:
            await self.on_transfer(destination, amount)

        if self._should_raise:
            raise self._should_raise

        if destination in self._failing:
            return False

        self.transfers.append((destination, amount))
        return True

    # Test helper methods

    def fail_for(self, *destinations: str):
        """Make transfers to these accounts fail"""
        self._failing.update(destinations)

    def set_error(self, error: Exception):
        """Set an error to be raised on transfer"""
        self._should_raise = error

    def reset(self):
        self.transfers.clear()
        self.attempts.clear()
        self._failing.clear()
        self._should_raise = None
        self.on_transfer = None

