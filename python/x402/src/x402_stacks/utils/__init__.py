"""
X402 Utility Functions
"""

from x402_stacks.utils.amount import format_amount, parse_amount
from x402_stacks.utils.hiro_client import HiroAPIClient
from x402_stacks.utils.tx_verification import (
    StacksTransactionVerifier,
    TransactionFetcher,
    parse_principal_repr,
    parse_uint_repr,
)

__all__ = [
    "parse_amount",
    "format_amount",
    "HiroAPIClient",
    # Transaction verification
    "StacksTransactionVerifier",
    "TransactionFetcher",
    "parse_uint_repr",
    "parse_principal_repr",
]
