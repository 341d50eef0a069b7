"""
Wish Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, List, Optional, Protocol, runtime_checkable

# Import only models (no I/O dependencies)
from .models import Wish, WishErrorCode


# ============================================================================
# Custom Exceptions - defined here to avoid importing repository
# ============================================================================

class WishServiceError(Exception):
    """Base class for typed, recoverable wish errors"""

    code: WishErrorCode

    def __init__(self, message: str, wish_id: Optional[int] = None):
        super().__init__(message)
        self.wish_id = wish_id


class InvalidTargetError(WishServiceError):
    """Target amount is not positive"""
    code = WishErrorCode.INVALID_TARGET


class InvalidContributionError(WishServiceError):
    """Attached value rejected, id space exhausted, goal not met or payout failed"""
    code = WishErrorCode.INVALID_CONTRIBUTION


class WishNotFoundError(WishServiceError):
    """Wish never created, already settled, or caller is not its owner"""
    code = WishErrorCode.WISH_NOT_FOUND


class WishServiceFault(RuntimeError):
    """
    Caller bug rather than a business outcome.

    Deliberately not a WishServiceError: handlers that map typed errors to
    responses must not swallow these.
    """
    pass


class DeadlineNotReachedError(WishServiceFault):
    """claim called before the wish's end timestamp"""

    def __init__(self, wish_id: int, end_timestamp: int, now: int):
        super().__init__(
            f"Cannot claim wish {wish_id} before end date ({now} < {end_timestamp})"
        )
        self.wish_id = wish_id
        self.end_timestamp = end_timestamp
        self.now = now


class NotAContributorError(WishServiceFault):
    """split_raised called by an account with no stake in the wish"""

    def __init__(self, wish_id: int, caller: str):
        super().__init__(f"Caller {caller} is not a contributor of wish {wish_id}")
        self.wish_id = wish_id
        self.caller = caller


class ReentrantCallError(WishServiceFault):
    """A wish operation was invoked from inside another in-flight operation"""
    pass


# ============================================================================
# Repository Protocols
# ============================================================================

@runtime_checkable
class WishRegistryProtocol(Protocol):
    """
    Interface for the wish slot store.

    Slot index equals wish id; a cleared slot means settled.
    """

    @property
    def next_id(self) -> int:
        """Id the next successful creation will receive"""
        ...

    def allocate(
        self,
        description: str,
        owner: str,
        target: int,
        end_timestamp: int,
        raised: int,
    ) -> Optional[Wish]:
        """Assign next_id and insert the wish in one step; None if ids are exhausted"""
        ...

    def get(self, wish_id: int) -> Optional[Wish]:
        """Live wish or None"""
        ...

    def save(self, wish: Wish) -> None:
        """Replace the stored wish in its slot"""
        ...

    def clear(self, wish_id: int) -> bool:
        """Settle a slot; returns False if it was already empty"""
        ...

    def active_ids(self) -> List[int]:
        """Ids of wishes not yet settled"""
        ...


# ============================================================================
# Client Protocols
# ============================================================================

@runtime_checkable
class TransferClientProtocol(Protocol):
    """Interface for the value transfer service"""

    async def transfer(self, destination: str, amount: int) -> bool:
        """Move amount out of escrow to destination; False on failure"""
        ...


@runtime_checkable
class ClockProtocol(Protocol):
    """Interface for the time source compared against end_timestamp"""

    def now(self) -> int:
        """Current timestamp"""
        ...


@runtime_checkable
class EventBusProtocol(Protocol):
    """Interface for Event Bus - no I/O imports"""

    async def publish_event(self, event: Any) -> bool:
        """Publish an event"""
        ...


# ============================================================================
# Exports
# ============================================================================

__all__ = [
    # Exceptions
    "WishServiceError",
    "InvalidTargetError",
    "InvalidContributionError",
    "WishNotFoundError",
    "WishServiceFault",
    "DeadlineNotReachedError",
    "NotAContributorError",
    "ReentrantCallError",
    # Protocols
    "WishRegistryProtocol",
    "TransferClientProtocol",
    "ClockProtocol",
    "EventBusProtocol",
]
