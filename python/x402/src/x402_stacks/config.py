"""
X402 Network Configuration
Centralized configuration for Stacks networks and indexer endpoints
"""

import os
from typing import Dict

from x402_stacks.exceptions import ConfigurationError, UnsupportedNetworkError


class NetworkConfig:
    """Network configuration for Stacks indexer endpoints"""

    # CAIP-2 style identifiers (chain ID after the colon)
    STACKS_MAINNET = "stacks:1"
    STACKS_TESTNET = "stacks:2147483648"

    # Hiro API base URLs
    API_URLS: Dict[str, str] = {
        "stacks:1": "https://api.hiro.so",
        "stacks:2147483648": "https://api.testnet.hiro.so",
    }

    # Environment overrides for the API base URLs
    API_URL_ENV_VARS: Dict[str, str] = {
        "stacks:1": "HIRO_API_URL",
        "stacks:2147483648": "HIRO_TESTNET_API_URL",
    }

    DEFAULT_TIMEOUT = 30.0

    @classmethod
    def supported_networks(cls) -> list[str]:
        """Return all supported network identifiers"""
        return [cls.STACKS_MAINNET, cls.STACKS_TESTNET]

    @classmethod
    def is_supported(cls, network: str) -> bool:
        return network in cls.API_URLS

    @classmethod
    def get_api_url(cls, network: str) -> str:
        """Get the indexer base URL for a network.

        The per-network environment variable (``HIRO_API_URL`` for mainnet,
        ``HIRO_TESTNET_API_URL`` for testnet) takes precedence over the default.

        Args:
            network: Network identifier (e.g., "stacks:1")

        Returns:
            Base URL without trailing slash

        Raises:
            UnsupportedNetworkError: If network is not supported
        """
        url = cls.API_URLS.get(network)
        if url is None:
            raise UnsupportedNetworkError(f"Unsupported network: {network}")
        override = os.getenv(cls.API_URL_ENV_VARS[network])
        return (override or url).rstrip("/")

    @classmethod
    def get_api_key(cls) -> str | None:
        """Get the Hiro API key from HIRO_API_KEY, if set"""
        return os.getenv("HIRO_API_KEY") or None

    @classmethod
    def get_timeout(cls) -> float:
        """Get the indexer request timeout in seconds (HIRO_API_TIMEOUT)"""
        value = os.getenv("HIRO_API_TIMEOUT")
        if not value:
            return cls.DEFAULT_TIMEOUT
        try:
            return float(value)
        except ValueError:
            raise ConfigurationError(f"Invalid HIRO_API_TIMEOUT: {value}")
