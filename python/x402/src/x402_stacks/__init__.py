"""
x402_stacks - Stacks blockchain support for x402 payments

Verify sBTC, STX and USDCx payments on Stacks behind an x402
facilitator-compatible interface.
"""

__version__ = "0.1.0"

from x402_stacks.config import NetworkConfig
from x402_stacks.exceptions import (
    ConfigurationError,
    InsufficientAmountError,
    MalformedTransferArgumentsError,
    RecipientMismatchError,
    TokenMismatchError,
    TransactionNotFoundError,
    TransactionNotSuccessfulError,
    TransferKindMismatchError,
    TransportError,
    UnknownTokenError,
    UnsupportedNetworkError,
    VerificationError,
    X402Error,
)
from x402_stacks.facilitator import StacksFacilitator, facilitator, settle, verify
from x402_stacks.server import create_payment_required_response, create_payment_requirements
from x402_stacks.tokens import NATIVE_TOKEN, TOKENS, TokenInfo, TokenRegistry, get_token_by_address
from x402_stacks.types import (
    Payment,
    PaymentRequired,
    PaymentRequirements,
    SettleResponse,
    SupportedToken,
    VerifyResponse,
)
from x402_stacks.utils import format_amount, parse_amount

STACKS_MAINNET = NetworkConfig.STACKS_MAINNET
STACKS_TESTNET = NetworkConfig.STACKS_TESTNET

__all__ = [
    "__version__",
    "STACKS_MAINNET",
    "STACKS_TESTNET",
    "NetworkConfig",
    # Tokens
    "NATIVE_TOKEN",
    "TOKENS",
    "TokenInfo",
    "TokenRegistry",
    "get_token_by_address",
    # Amounts
    "parse_amount",
    "format_amount",
    # Types
    "Payment",
    "PaymentRequired",
    "PaymentRequirements",
    "VerifyResponse",
    "SettleResponse",
    "SupportedToken",
    # Requirements
    "create_payment_requirements",
    "create_payment_required_response",
    # Facilitator
    "StacksFacilitator",
    "facilitator",
    "verify",
    "settle",
    # Exceptions
    "X402Error",
    "ConfigurationError",
    "UnsupportedNetworkError",
    "UnknownTokenError",
    "VerificationError",
    "TransactionNotFoundError",
    "TransactionNotSuccessfulError",
    "TransferKindMismatchError",
    "TokenMismatchError",
    "RecipientMismatchError",
    "InsufficientAmountError",
    "MalformedTransferArgumentsError",
    "TransportError",
]
