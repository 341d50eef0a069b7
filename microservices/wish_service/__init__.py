"""
Wish Service

Crowdfunding escrow ledger for isA platform.

Features:
- Wish (campaign) registration with a minimum owner commitment
- Owner top-ups and per-contributor pledge bookkeeping
- Deadline-gated claim by the owner when the goal is met
- Redistribution among contributors when it is not
- Event-driven notifications on creation and settlement
"""

__version__ = "1.0.0"
