"""
StacksFacilitator - x402 facilitator interface for Stacks payments
"""

import logging

from x402_stacks.config import NetworkConfig
from x402_stacks.exceptions import ConfigurationError, UnsupportedNetworkError
from x402_stacks.tokens import TokenRegistry
from x402_stacks.types import Payment, SettleResponse, SupportedToken, VerifyResponse
from x402_stacks.utils.hiro_client import HiroAPIClient
from x402_stacks.utils.tx_verification import StacksTransactionVerifier, TransactionFetcher

logger = logging.getLogger(__name__)


class StacksFacilitator:
    """
    x402 facilitator for Stacks.

    Verification and settlement are the same operation: a confirmed Stacks
    transaction is final, so there is nothing left to settle once it has
    been verified.
    """

    def __init__(self, fetchers: dict[str, TransactionFetcher] | None = None) -> None:
        """
        Args:
            fetchers: Optional indexer client per network. Networks without an
                entry get a fresh HiroAPIClient, configured from NetworkConfig,
                for every verification.
        """
        self._fetchers: dict[str, TransactionFetcher] = dict(fetchers or {})

    @property
    def supported_networks(self) -> list[str]:
        return NetworkConfig.supported_networks()

    @property
    def supported_tokens(self) -> list[str]:
        return TokenRegistry.addresses()

    def get_tokens(self, network: str) -> list[SupportedToken]:
        """Get supported tokens for a network (empty for unknown networks)"""
        if network not in self.supported_networks:
            return []
        return [
            SupportedToken(symbol=symbol, address=info.address, decimals=info.decimals)
            for symbol, info in TokenRegistry.get_tokens().items()
        ]

    async def verify(self, payment: Payment) -> VerifyResponse:
        """
        Verify a payment against the chain.

        Args:
            payment: Payment claim from client

        Returns:
            VerifyResponse
        """
        try:
            verifier = self._get_verifier(payment.network)
        except ConfigurationError as e:
            logger.warning("Rejecting payment tx=%s: %s", payment.tx_id, e)
            return VerifyResponse(valid=False, error=str(e))
        return await verifier.verify_transaction(payment)

    async def settle(self, payment: Payment) -> SettleResponse:
        """
        Settle a payment (for Stacks, verification IS settlement).

        Args:
            payment: Payment claim from client

        Returns:
            SettleResponse carrying the verification reason on failure
        """
        result = await self.verify(payment)
        return SettleResponse.from_verification(result)

    def _get_verifier(self, network: str) -> StacksTransactionVerifier:
        if not NetworkConfig.is_supported(network):
            raise UnsupportedNetworkError(f"Unsupported network: {network}")
        fetcher = self._fetchers.get(network)
        if fetcher is None:
            fetcher = HiroAPIClient.for_network(network)
        return StacksTransactionVerifier(fetcher)


# Default facilitator used by the module-level helpers
facilitator = StacksFacilitator()


async def verify(payment: Payment) -> VerifyResponse:
    """Verify a Stacks payment transaction using the default facilitator"""
    return await facilitator.verify(payment)


async def settle(payment: Payment) -> SettleResponse:
    """Settle a Stacks payment using the default facilitator"""
    return await facilitator.settle(payment)
