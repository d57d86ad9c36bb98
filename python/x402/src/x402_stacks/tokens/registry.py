"""
Token registry - Fixed set of tokens accepted for Stacks payments
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from x402_stacks.exceptions import UnknownTokenError

# Sentinel address used for the chain's native asset (STX)
NATIVE_TOKEN = "native"


@dataclass(frozen=True)
class TokenInfo:
    """Token information"""

    address: str
    decimals: int
    symbol: str


class TokenRegistry:
    """Token registry

    Read-only after import: sBTC and USDCx are SIP-010 contracts, STX is the
    native asset and uses the ``native`` sentinel as its address.
    """

    _tokens: Mapping[str, TokenInfo] = MappingProxyType(
        {
            "sBTC": TokenInfo(
                address="SP3K8BC0PPEVCV7NZ6QSRWPQ2JE9E5B6N3PA0KBR9.token-sbtc",
                decimals=8,
                symbol="sBTC",
            ),
            "STX": TokenInfo(
                address=NATIVE_TOKEN,
                decimals=6,
                symbol="STX",
            ),
            "USDCx": TokenInfo(
                address="SP3Y2ZSH8P7D50B0VBTSX11S7XSG24M1VB9YFQA4K.token-susdc",
                decimals=6,
                symbol="USDCx",
            ),
        }
    )

    @classmethod
    def get_token(cls, symbol: str) -> TokenInfo:
        """Get token information for a symbol

        Raises:
            UnknownTokenError: If token does not exist
        """
        token = cls._tokens.get(symbol)
        if token is None:
            raise UnknownTokenError(f"Unknown token {symbol}")
        return token

    @classmethod
    def find_by_address(cls, address: str) -> TokenInfo | None:
        """Find token information by address (case-insensitive)"""
        lower = address.lower()
        for info in cls._tokens.values():
            if info.address.lower() == lower:
                return info
        return None

    @classmethod
    def get_symbol_by_address(cls, address: str) -> str | None:
        """Find the registry symbol for an address, or None if unknown"""
        lower = address.lower()
        for symbol, info in cls._tokens.items():
            if info.address.lower() == lower:
                return symbol
        return None

    @classmethod
    def get_tokens(cls) -> Mapping[str, TokenInfo]:
        """Get all registered tokens keyed by symbol"""
        return cls._tokens

    @classmethod
    def addresses(cls) -> list[str]:
        """Get all token addresses, in registry order"""
        return [info.address for info in cls._tokens.values()]

    @classmethod
    def is_native(cls, address: str) -> bool:
        """Return True if *address* denotes the native STX asset"""
        return address.lower() == cls._tokens["STX"].address.lower()


TOKENS = TokenRegistry.get_tokens()


def get_token_by_address(address: str) -> str | None:
    """Get the token symbol for an address, or None if it is not registered"""
    return TokenRegistry.get_symbol_by_address(address)
