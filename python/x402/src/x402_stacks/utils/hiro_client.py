"""
HiroAPIClient - Client for the Hiro Stacks indexer API
"""

import logging
from typing import Any

import httpx

from x402_stacks.config import NetworkConfig

logger = logging.getLogger(__name__)


class HiroAPIClient:
    """
    Client for the Hiro Stacks API.

    Only transaction lookup is needed: a single GET per verification,
    no retries. The timeout bounds how long an unresponsive indexer can
    stall a verification. Each request opens its own httpx client, so no
    connection outlives the event loop it was created on.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            base_url: Indexer base URL (e.g. "https://api.hiro.so")
            api_key: Optional Hiro API key, sent as ``x-api-key``
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._base_url = base_url.rstrip("/")
        self._headers = {"Accept": "application/json"}
        if api_key:
            self._headers["x-api-key"] = api_key
        self._timeout = timeout if timeout is not None else NetworkConfig.DEFAULT_TIMEOUT
        self._transport = transport

    @classmethod
    def for_network(
        cls,
        network: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "HiroAPIClient":
        """Create a client configured from NetworkConfig for *network*"""
        return cls(
            base_url=NetworkConfig.get_api_url(network),
            api_key=NetworkConfig.get_api_key(),
            timeout=NetworkConfig.get_timeout(),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def get_transaction(self, tx_id: str) -> dict[str, Any] | None:
        """
        Fetch a transaction record by id.

        Args:
            tx_id: Transaction id (0x-prefixed hex)

        Returns:
            Decoded JSON record, or None if the indexer answered non-2xx

        Raises:
            httpx.HTTPError: On connection failures and timeouts
            ValueError: If the response body is not a JSON object
        """
        async with httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            response = await client.get(f"/extended/v1/tx/{tx_id}")
        if not response.is_success:
            logger.info(
                "Indexer returned %s for transaction %s", response.status_code, tx_id
            )
            return None
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected transaction response: {type(data).__name__}")
        return data
