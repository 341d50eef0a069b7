"""
Wish Service - Business Logic Layer

Crowdfunding escrow ledger. Owners register wishes with a target and a
deadline, anyone may pledge toward them, and after the deadline the escrow
is either released to the owner (goal met) or redistributed among the
contributors (goal missed).

Rules:
- Creation needs target > 0 and an owner commitment of at least
  min_commitment_percent of target (integer floor)
- Owner funding tops up `raised`; everyone else accumulates a single
  contributor stake, in first-pledge order
- Only the owner may claim, only after the deadline, only if raised >= target;
  the slot is cleared only once the payout transfer succeeds
- Only a contributor may split; the slot is cleared before any transfer and
  transfers are best-effort
- Settled ids are never reused
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import List, Optional, Tuple

from core.config.wish_config import WishServiceConfig

from .clock import SystemClock
from .events.publishers import publish_wish_created, publish_wish_settled
from .models import (
    Contribution,
    FundRequest,
    Payout,
    SettlementKind,
    SettlementReceipt,
    SplitFormula,
    Wish,
    WishCreateRequest,
    WishStatus,
)
from .protocols import (
    ClockProtocol,
    DeadlineNotReachedError,
    EventBusProtocol,
    InvalidContributionError,
    InvalidTargetError,
    NotAContributorError,
    ReentrantCallError,
    TransferClientProtocol,
    WishNotFoundError,
    WishRegistryProtocol,
)

logger = logging.getLogger(__name__)


class WishService:
    """
    Wish Service - Core business logic

    Every mutating operation runs as one serialized transaction: an
    asyncio.Lock keeps operations from interleaving while a transfer is
    awaited, and a call made from inside an in-flight operation on the same
    task raises ReentrantCallError instead of deadlocking.

    Only same-task re-entry is detected. A collaborator that calls back from
    a task of its own (asyncio.gather, create_task) waits on the lock behind
    the operation that is awaiting it and never completes.
    """

    def __init__(
        self,
        registry: WishRegistryProtocol,
        transfer_client: TransferClientProtocol,
        clock: Optional[ClockProtocol] = None,
        event_bus: Optional[EventBusProtocol] = None,
        config: Optional[WishServiceConfig] = None,
    ):
        """
        Initialize wish service with dependencies.

        Args:
            registry: Wish slot store
            transfer_client: Moves escrowed value to accounts
            clock: Time source for deadline checks (system clock by default)
            event_bus: Event bus for notifications (optional)
            config: Ledger policy
        """
        self.registry = registry
        self.transfer_client = transfer_client
        self.clock = clock or SystemClock()
        self.event_bus = event_bus
        self.config = config or WishServiceConfig()
        self.split_formula = SplitFormula(self.config.split_formula)

        if not 0 <= self.config.min_commitment_percent <= 100:
            raise ValueError("min_commitment_percent must be within 0..100")

        self._lock = asyncio.Lock()
        self._active_task: Optional[asyncio.Task] = None

    @asynccontextmanager
    async def _transaction(self, operation: str):
        current = asyncio.current_task()
        if self._active_task is not None and self._active_task is current:
            raise ReentrantCallError(
                f"{operation} called while another wish operation is in flight"
            )
        async with self._lock:
            self._active_task = current
            try:
                yield
            finally:
                self._active_task = None

    @property
    def next_id(self) -> int:
        return self.registry.next_id

    async def get_next_id(self) -> int:
        return self.registry.next_id

    def minimum_commitment(self, target: int) -> int:
        """Smallest creation value accepted for a given target"""
        return target * self.config.min_commitment_percent // 100

    # ====================
    # Creation
    # ====================

    async def create_campaign(
        self,
        description: str,
        end_timestamp: int,
        target: int,
        attached_value: int,
        caller: str,
    ) -> int:
        """
        Register a new wish owned by the caller.

        Args:
            description: Free text
            end_timestamp: Deadline, in clock units
            target: Funding goal, must be positive
            attached_value: Value attached to the call, becomes `raised`
            caller: Creating account

        Returns:
            The new wish id

        Raises:
            InvalidTargetError: target is not positive
            InvalidContributionError: attached value below the minimum
                commitment, or the id space is exhausted
        """
        async with self._transaction("create_campaign"):
            if target <= 0:
                raise InvalidTargetError(f"Target must be positive, got {target}")

            minimum = self.minimum_commitment(target)
            if attached_value < 0 or attached_value < minimum:
                raise InvalidContributionError(
                    f"Attached value {attached_value} is below the minimum commitment {minimum}"
                )

            wish = self.registry.allocate(
                description=description,
                owner=caller,
                target=target,
                end_timestamp=end_timestamp,
                raised=attached_value,
            )
            if wish is None:
                raise InvalidContributionError("Wish id space exhausted")

        logger.info(
            f"Created wish {wish.id} for {caller}: target {target}, raised {attached_value}"
        )
        await publish_wish_created(self.event_bus, wish_id=wish.id, owner=caller)
        return wish.id

    async def create_wish(self, request: WishCreateRequest) -> int:
        """Request-model entry point for create_campaign"""
        return await self.create_campaign(
            description=request.description,
            end_timestamp=request.end_timestamp,
            target=request.target,
            attached_value=request.attached_value,
            caller=request.caller,
        )

    # ====================
    # Funding
    # ====================

    async def fund(self, wish_id: int, attached_value: int, caller: str) -> None:
        """
        Pledge the attached value toward a wish.

        The owner's value tops up `raised`; any other caller's value is added
        to their single contributor entry, created on first pledge.

        Raises:
            InvalidContributionError: value is not positive, or late funding
                is disabled and the deadline has passed
            WishNotFoundError: wish is not active
        """
        async with self._transaction("fund"):
            if attached_value <= 0:
                raise InvalidContributionError(
                    "Contribution must be positive", wish_id=wish_id
                )

            stored = self.registry.get(wish_id)
            if stored is None:
                raise WishNotFoundError(f"Wish {wish_id} not found", wish_id=wish_id)

            if (
                not self.config.allow_funding_after_deadline
                and self.clock.now() >= stored.end_timestamp
            ):
                raise InvalidContributionError(
                    f"Wish {wish_id} no longer accepts funding", wish_id=wish_id
                )

            wish = stored.model_copy(deep=True)
            if caller == wish.owner:
                wish.raised = wish.raised + attached_value
            else:
                contribution = wish.find_contributor(caller)
                if contribution is not None:
                    contribution.amount += attached_value
                else:
                    wish.contributors.append(
                        Contribution(account=caller, amount=attached_value)
                    )
            self.registry.save(wish)

        logger.debug(f"Wish {wish_id} funded by {caller}: {attached_value}")

    async def fund_wish(self, request: FundRequest) -> None:
        """Request-model entry point for fund"""
        await self.fund(
            wish_id=request.wish_id,
            attached_value=request.attached_value,
            caller=request.caller,
        )

    # ====================
    # Settlement
    # ====================

    async def claim(self, wish_id: int, caller: str) -> SettlementReceipt:
        """
        Release the whole escrow to the owner once the goal is met.

        Raises:
            WishNotFoundError: wish is not active, or caller is not the owner
            DeadlineNotReachedError: called before end_timestamp (fault)
            InvalidContributionError: raised < target, or the payout failed
        """
        async with self._transaction("claim"):
            wish = self.registry.get(wish_id)
            # A non-owner learns nothing about whether the wish exists
            if wish is None or wish.owner != caller:
                raise WishNotFoundError(f"Wish {wish_id} not found", wish_id=wish_id)

            now = self.clock.now()
            if now < wish.end_timestamp:
                raise DeadlineNotReachedError(wish_id, wish.end_timestamp, now)

            if not wish.goal_reached:
                raise InvalidContributionError(
                    f"Wish {wish_id} has not reached its target "
                    f"({wish.raised} < {wish.target})",
                    wish_id=wish_id,
                )

            payout = wish.total_worth
            if not await self._send(wish.owner, payout):
                raise InvalidContributionError(
                    f"Payout of {payout} to {wish.owner} failed", wish_id=wish_id
                )

            self.registry.clear(wish_id)
            receipt = SettlementReceipt(
                wish_id=wish_id,
                kind=SettlementKind.CLAIMED,
                total_worth=payout,
                payouts=[Payout(account=wish.owner, amount=payout, success=True)],
            )

        logger.info(f"Wish {wish_id} claimed by {caller}: paid out {payout}")
        await publish_wish_settled(
            self.event_bus,
            wish_id=wish_id,
            owner=wish.owner,
            kind=SettlementKind.CLAIMED,
            total_worth=payout,
            paid_out=payout,
            settled_by=caller,
        )
        return receipt

    async def split_raised(self, wish_id: int, caller: str) -> SettlementReceipt:
        """
        Redistribute the escrow among contributors.

        The slot is cleared before any transfer; a failed transfer is logged
        and recorded on the receipt, never retried or rolled back.

        Raises:
            WishNotFoundError: wish is not active
            NotAContributorError: caller has no stake in the wish (fault)
        """
        async with self._transaction("split_raised"):
            wish = self.registry.get(wish_id)
            if wish is None:
                raise WishNotFoundError(f"Wish {wish_id} not found", wish_id=wish_id)

            if not wish.is_contributor(caller):
                raise NotAContributorError(wish_id, caller)

            total_worth = wish.total_worth
            shares = self.compute_shares(wish)
            retained = total_worth - sum(amount for _, amount in shares)

            self.registry.clear(wish_id)

            payouts: List[Payout] = []
            for account, amount in shares:
                if amount == 0:
                    payouts.append(Payout(account=account, amount=0, success=True))
                    continue
                success = await self._send(account, amount)
                if not success:
                    logger.error(f"Split payout of {amount} to {account} for wish {wish_id} failed")
                payouts.append(Payout(account=account, amount=amount, success=success))

            receipt = SettlementReceipt(
                wish_id=wish_id,
                kind=SettlementKind.SPLIT,
                total_worth=total_worth,
                payouts=payouts,
                retained=retained,
            )

        logger.info(
            f"Wish {wish_id} split by {caller}: {receipt.paid_out} of {total_worth} paid out, "
            f"{len(receipt.failed_payouts)} failed"
        )
        await publish_wish_settled(
            self.event_bus,
            wish_id=wish_id,
            owner=wish.owner,
            kind=SettlementKind.SPLIT,
            total_worth=total_worth,
            paid_out=receipt.paid_out,
            failed_accounts=[p.account for p in receipt.failed_payouts],
            settled_by=caller,
        )
        return receipt

    def compute_shares(self, wish: Wish) -> List[Tuple[str, int]]:
        """
        Size every contributor's share of a split.

        literal_percentage pays each contributor amount * 100 // total_worth
        (a 0-100 figure, not a slice of the pool). proportional hands out the whole pool weighted by
        stake; integer remainders stay in escrow.
        """
        total_worth = wish.total_worth
        if self.split_formula == SplitFormula.LITERAL_PERCENTAGE:
            return [
                (c.account, c.amount * 100 // total_worth) for c in wish.contributors
            ]

        stakes = wish.contributors_raised
        return [(c.account, c.amount * total_worth // stakes) for c in wish.contributors]

    async def _send(self, destination: str, amount: int) -> bool:
        try:
            return bool(await self.transfer_client.transfer(destination, amount))
        except Exception as e:
            logger.error(f"Transfer of {amount} to {destination} raised: {e}", exc_info=True)
            return False

    # ====================
    # Reads
    # ====================

    async def get_campaign(self, wish_id: int) -> Wish:
        """
        Get an active wish.

        Returns a copy; mutating it does not touch the ledger.

        Raises:
            WishNotFoundError: id never assigned, or the wish is settled
        """
        wish = self.registry.get(wish_id)
        if wish is None:
            raise WishNotFoundError(f"Wish {wish_id} not found", wish_id=wish_id)
        return wish.model_copy(deep=True)

    async def get_contributors_raised(self, wish_id: int) -> Optional[int]:
        """Sum of contributor stakes, or None if the wish is not active"""
        wish = self.registry.get(wish_id)
        if wish is None:
            return None
        return wish.contributors_raised

    async def get_status(self, wish_id: int) -> WishStatus:
        if self.registry.get(wish_id) is not None:
            return WishStatus.ACTIVE
        if 0 <= wish_id < self.registry.next_id:
            return WishStatus.SETTLED
        return WishStatus.NONEXISTENT
