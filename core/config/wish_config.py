#!/usr/bin/env python3
"""Wish service configuration

Ledger policy knobs plus the endpoints of the collaborators the wish
service talks to (wallet service for payouts, NATS for notifications).
"""
import os
from dataclasses import dataclass

def _bool(val: str) -> bool:
    return val.lower() == "true"

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


@dataclass
class WishServiceConfig:
    """Wish service settings"""

    # ===========================================
    # Ledger policy
    # ===========================================
    # Minimum owner commitment at creation, as a percentage of target
    min_commitment_percent: int = 10

    # When true, funding is accepted until settlement, even past the deadline
    allow_funding_after_deadline: bool = True

    # "literal_percentage" (default) or "proportional"
    split_formula: str = "literal_percentage"

    # ===========================================
    # Payouts (wallet service)
    # ===========================================
    wallet_service_url: str = "http://localhost:8208"
    escrow_wallet_id: str = ""
    wallet_timeout: float = 30.0

    # ===========================================
    # Notifications (NATS)
    # ===========================================
    nats_enabled: bool = False
    nats_url: str = "nats://localhost:4222"

    @classmethod
    def from_env(cls) -> 'WishServiceConfig':
        """Load wish service configuration from environment variables"""
        return cls(
            min_commitment_percent=_int(os.getenv("WISH_MIN_COMMITMENT_PERCENT", "10"), 10),
            allow_funding_after_deadline=_bool(os.getenv("WISH_ALLOW_FUNDING_AFTER_DEADLINE", "true")),
            split_formula=os.getenv("WISH_SPLIT_FORMULA", "literal_percentage"),

            wallet_service_url=os.getenv("WALLET_SERVICE_URL", "http://localhost:8208"),
            escrow_wallet_id=os.getenv("WISH_ESCROW_WALLET_ID", ""),
            wallet_timeout=float(os.getenv("WALLET_TIMEOUT", "30.0") or 30.0),

            nats_enabled=_bool(os.getenv("NATS_ENABLED", "false")),
            nats_url=os.getenv("NATS_URL", "nats://localhost:4222"),
        )
