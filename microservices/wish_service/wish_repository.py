"""
Wish Registry

Append-only, id-indexed slot store for wishes. The registry exclusively owns
every Wish it holds; a cleared slot marks a settled wish and its id is never
handed out again.
"""

import logging
from typing import Dict, List, Optional

from .models import MAX_WISH_ID, Wish

logger = logging.getLogger(__name__)


class WishRegistry:
    """In-process wish storage with a monotonically increasing id counter"""

    def __init__(self, next_id: int = 0):
        """
        Args:
            next_id: Starting counter value (0 for a fresh ledger)
        """
        if not 0 <= next_id <= MAX_WISH_ID:
            raise ValueError(f"next_id must be within 0..{MAX_WISH_ID}")
        self._next_id = next_id
        self._slots: Dict[int, Optional[Wish]] = {}

    @property
    def next_id(self) -> int:
        return self._next_id

    def allocate(
        self,
        description: str,
        owner: str,
        target: int,
        end_timestamp: int,
        raised: int,
    ) -> Optional[Wish]:
        """
        Assign next_id to a new wish and insert it.

        The counter bump and the slot insert happen together: when the
        counter cannot advance, nothing is stored and None is returned.
        """
        wish_id = self._next_id
        if wish_id + 1 > MAX_WISH_ID:
            logger.warning(f"Wish id space exhausted at {wish_id}")
            return None

        wish = Wish(
            id=wish_id,
            description=description,
            owner=owner,
            target=target,
            end_timestamp=end_timestamp,
            raised=raised,
        )
        self._slots[wish_id] = wish
        self._next_id = wish_id + 1
        return wish

    def get(self, wish_id: int) -> Optional[Wish]:
        return self._slots.get(wish_id)

    def save(self, wish: Wish) -> None:
        if self._slots.get(wish.id) is None:
            raise KeyError(f"Wish {wish.id} is not active")
        self._slots[wish.id] = wish

    def clear(self, wish_id: int) -> bool:
        """Settle a slot. Clearing an empty slot is a no-op."""
        if self._slots.get(wish_id) is None:
            return False
        self._slots[wish_id] = None
        return True

    def active_ids(self) -> List[int]:
        return [wish_id for wish_id, wish in sorted(self._slots.items()) if wish is not None]

    def is_settled(self, wish_id: int) -> bool:
        return wish_id in self._slots and self._slots[wish_id] is None

    def __len__(self) -> int:
        return len(self.active_ids())


__all__ = ["WishRegistry"]
