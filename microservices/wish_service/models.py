"""
Wish Service Models

Defines data models for crowdfunding wishes held in escrow until settlement
"""

from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict
from enum import Enum


# Ids are u32; the counter itself must stay within range
MAX_WISH_ID = 2**32 - 1


class WishErrorCode(str, Enum):
    """Typed error kinds returned by wish operations"""
    INVALID_CONTRIBUTION = "InvalidContribution"
    WISH_NOT_FOUND = "WishNotFound"
    INVALID_TARGET = "InvalidTarget"


class WishStatus(str, Enum):
    """Lifecycle of a wish slot"""
    NONEXISTENT = "nonexistent"
    ACTIVE = "active"
    SETTLED = "settled"


class SplitFormula(str, Enum):
    """How split_raised sizes each contributor's share"""
    LITERAL_PERCENTAGE = "literal_percentage"  # amount * 100 // total_worth
    PROPORTIONAL = "proportional"  # whole pool, weighted by stake


class SettlementKind(str, Enum):
    """Which settlement path closed the wish"""
    CLAIMED = "claimed"
    SPLIT = "split"


class Contribution(BaseModel):
    """A non-owner pledger's cumulative stake"""
    model_config = ConfigDict(from_attributes=True)

    account: str
    amount: int = Field(ge=0)


class Wish(BaseModel):
    """A funding campaign and its accumulated pledges"""
    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: int = Field(ge=0, le=MAX_WISH_ID)
    description: str = ""
    owner: str
    target: int = Field(gt=0)
    end_timestamp: int = Field(ge=0)
    raised: int = Field(ge=0)
    contributors: List[Contribution] = Field(default_factory=list)

    @property
    def contributors_raised(self) -> int:
        """Sum of all contributor stakes"""
        return sum(c.amount for c in self.contributors)

    @property
    def total_worth(self) -> int:
        """Everything held in escrow for this wish"""
        return self.raised + self.contributors_raised

    @property
    def goal_reached(self) -> bool:
        # Only owner top-ups count toward the goal
        return self.raised >= self.target

    def find_contributor(self, account: str) -> Optional[Contribution]:
        for contribution in self.contributors:
            if contribution.account == account:
                return contribution
        return None

    def contributor_amount(self, account: str) -> int:
        contribution = self.find_contributor(account)
        return contribution.amount if contribution else 0

    def is_contributor(self, account: str) -> bool:
        return self.find_contributor(account) is not None


class WishCreateRequest(BaseModel):
    """Create wish request"""
    description: str = ""
    end_timestamp: int = Field(ge=0)
    target: int
    attached_value: int = 0
    caller: str = Field(..., min_length=1)


class FundRequest(BaseModel):
    """Pledge value toward a wish"""
    wish_id: int = Field(ge=0)
    attached_value: int = 0
    caller: str = Field(..., min_length=1)


class Payout(BaseModel):
    """One transfer requested during settlement"""
    account: str
    amount: int = Field(ge=0)
    success: bool


class SettlementReceipt(BaseModel):
    """Outcome of claim or split_raised"""
    wish_id: int
    kind: SettlementKind
    total_worth: int = Field(ge=0)
    payouts: List[Payout] = Field(default_factory=list)
    retained: int = Field(ge=0, default=0)  # Value left in escrow (split only)

    @property
    def paid_out(self) -> int:
        return sum(p.amount for p in self.payouts if p.success)

    @property
    def failed_payouts(self) -> List[Payout]:
        return [p for p in self.payouts if not p.success]


__all__ = [
    "MAX_WISH_ID",
    "WishErrorCode",
    "WishStatus",
    "SplitFormula",
    "SettlementKind",
    "Contribution",
    "Wish",
    "WishCreateRequest",
    "FundRequest",
    "Payout",
    "SettlementReceipt",
]
