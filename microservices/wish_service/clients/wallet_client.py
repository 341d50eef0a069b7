"""
Wallet Transfer Client

Transfer service for wish payouts, backed by the wallet service HTTP API.
Escrowed value sits in a dedicated escrow wallet; a payout moves funds from
that wallet to the destination account's primary wallet.
"""

import logging
from typing import Optional

import httpx

from core.config.wish_config import WishServiceConfig

logger = logging.getLogger(__name__)


class WalletTransferClient:
    """Wallet service HTTP client implementing TransferClientProtocol"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        escrow_wallet_id: Optional[str] = None,
        config: Optional[WishServiceConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize Wallet Transfer client

        Args:
            base_url: Wallet service base URL, defaults to config
            escrow_wallet_id: Wallet holding escrowed wish funds, defaults to config
            config: Wish service configuration
            http_client: Preconfigured httpx client (tests inject a mock transport)
        """
        config = config or WishServiceConfig.from_env()
        self.base_url = (base_url or config.wallet_service_url).rstrip('/')
        self.escrow_wallet_id = escrow_wallet_id or config.escrow_wallet_id
        if not self.escrow_wallet_id:
            raise ValueError("escrow_wallet_id is required for wish payouts")

        self.client = http_client or httpx.AsyncClient(timeout=config.wallet_timeout)

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def get_primary_wallet_id(self, account: str) -> Optional[str]:
        """
        Resolve the wallet that receives payouts for an account.

        Args:
            account: Account (user) ID

        Returns:
            Wallet ID, or None if the account has no wallet
        """
        try:
            response = await self.client.get(
                f"{self.base_url}/api/v1/users/{account}/wallets"
            )
            response.raise_for_status()
            payload = response.json()

            wallets = payload.get("wallets", []) if isinstance(payload, dict) else payload
            if not wallets:
                return None

            # Fiat wallet first, same as the wallet service's primary wallet rule
            for wallet in wallets:
                if wallet.get("wallet_type", "fiat") == "fiat":
                    return wallet.get("wallet_id")
            return wallets[0].get("wallet_id")

        except httpx.HTTPStatusError as e:
            logger.error(f"Failed to look up wallets for {account}: {e.response.status_code}")
            return None
        except Exception as e:
            logger.error(f"Error looking up wallets for {account}: {e}")
            return None

    async def transfer(self, destination: str, amount: int) -> bool:
        """
        Pay amount out of escrow to destination.

        Args:
            destination: Receiving account ID
            amount: Amount to transfer

        Returns:
            True when the wallet service accepted the transfer
        """
        to_wallet_id = await self.get_primary_wallet_id(destination)
        if not to_wallet_id:
            logger.error(f"No wallet to receive payout for {destination}")
            return False

        try:
            response = await self.client.post(
                f"{self.base_url}/api/v1/wallets/{self.escrow_wallet_id}/transfer",
                json={
                    "to_wallet_id": to_wallet_id,
                    "amount": amount,
                    "description": "Wish payout",
                },
            )
            response.raise_for_status()
            result = response.json()
            success = bool(result.get("success", True)) if isinstance(result, dict) else True
            if not success:
                logger.error(f"Wallet service rejected payout to {destination}: {result.get('message')}")
            return success

        except httpx.HTTPStatusError as e:
            logger.error(f"Failed to transfer to {destination}: {e.response.status_code}")
            return False
        except Exception as e:
            logger.error(f"Error transferring to {destination}: {e}")
            return False


__all__ = ["WalletTransferClient"]
