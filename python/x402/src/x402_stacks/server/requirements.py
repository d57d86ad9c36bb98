"""
Payment requirements builder for the 402 challenge
"""

from x402_stacks.config import NetworkConfig
from x402_stacks.tokens import TokenRegistry
from x402_stacks.types import PaymentRequired, PaymentRequirements, PaymentRequirementsExtra


def create_payment_requirements(
    recipient: str,
    amount: str | int,
    token: str = "sBTC",
    network: str = NetworkConfig.STACKS_MAINNET,
) -> PaymentRequirements:
    """
    Create x402 PaymentRequirements for Stacks.

    Args:
        recipient: Stacks address receiving the payment
        amount: Minimum amount in smallest units (string or int)
        token: Token symbol (e.g. "sBTC", "STX", "USDCx")
        network: Network identifier, mainnet by default

    Returns:
        PaymentRequirements

    Raises:
        UnknownTokenError: If token is not registered
    """
    token_info = TokenRegistry.get_token(token)

    return PaymentRequirements(
        network=network,
        token=token_info.address,
        amount=str(amount),
        recipient=recipient,
        extra=PaymentRequirementsExtra(
            name=token_info.symbol,
            decimals=token_info.decimals,
        ),
    )


def create_payment_required_response(
    requirements: PaymentRequirements,
    error: str = "Payment Required",
    reason: str | None = None,
) -> PaymentRequired:
    """Create the 402 response body restating what would satisfy the request"""
    return PaymentRequired(
        error=error,
        reason=reason,
        paymentRequirements=requirements,
    )
