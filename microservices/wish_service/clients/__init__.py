"""
Wish Service Clients

Clients for the services wish_service depends on.
"""

from .wallet_client import WalletTransferClient

__all__ = ["WalletTransferClient"]
