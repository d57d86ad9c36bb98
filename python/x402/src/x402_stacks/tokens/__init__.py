"""
Token registry module
"""

from x402_stacks.tokens.registry import (
    NATIVE_TOKEN,
    TOKENS,
    TokenInfo,
    TokenRegistry,
    get_token_by_address,
)

__all__ = [
    "NATIVE_TOKEN",
    "TOKENS",
    "TokenInfo",
    "TokenRegistry",
    "get_token_by_address",
]
