"""
FastAPI middleware for x402 payment processing
"""

import logging
from functools import wraps
from typing import Any, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from x402_stacks.config import NetworkConfig
from x402_stacks.encoding import decode_payment_payload, encode_payment_payload
from x402_stacks.facilitator import StacksFacilitator
from x402_stacks.facilitator import facilitator as default_facilitator
from x402_stacks.server import create_payment_required_response, create_payment_requirements
from x402_stacks.types import Payment, PaymentHeader, PaymentRequirements

logger = logging.getLogger(__name__)

PAYMENT_HEADER = "X-PAYMENT"
PAYMENT_RESPONSE_HEADER = "X-PAYMENT-RESPONSE"


class X402Middleware:
    """
    FastAPI middleware for automatic 402 payment handling.

    Usage:
        app = FastAPI()
        middleware = X402Middleware()

        @app.get("/premium")
        @middleware.protect(amount="10000", token="sBTC", recipient="SP...")
        async def premium(request: Request):
            return {"data": "secret"}
    """

    def __init__(self, facilitator: StacksFacilitator | None = None) -> None:
        self._facilitator = facilitator or default_facilitator

    def protect(
        self,
        amount: str | int,
        recipient: str,
        token: str = "sBTC",
        network: str = NetworkConfig.STACKS_MAINNET,
    ) -> Callable:
        """
        Decorator to protect endpoints with payment requirements.

        The decorated endpoint must accept ``request: Request``.

        Args:
            amount: Price in the token's smallest unit
            recipient: Stacks address receiving payments
            token: Token symbol (e.g. "sBTC", "STX", "USDCx")
            network: Network identifier

        Returns:
            Decorated function
        """
        if not recipient:
            raise ValueError("recipient is required")
        if network not in self._facilitator.supported_networks:
            raise ValueError(f"Unsupported network: {network}")

        # Validates the token symbol at startup
        requirements = create_payment_requirements(recipient, amount, token, network)

        def decorator(func: Callable) -> Callable:
            @wraps(func)
            async def wrapper(request: Request, *args: Any, **kwargs: Any) -> Response:
                payment_header = request.headers.get(PAYMENT_HEADER)

                if not payment_header:
                    return self._payment_required(requirements)

                try:
                    header = decode_payment_payload(payment_header, PaymentHeader)
                except (ValueError, TypeError) as e:
                    logger.error("Failed to decode payment header: %s", e)
                    return JSONResponse(
                        content={"error": "Payment Error", "reason": str(e)},
                        status_code=400,
                    )

                if header.token and header.token.lower() != requirements.token.lower():
                    return self._payment_required(
                        requirements,
                        error="Payment Invalid",
                        reason=f"Unsupported payment token: {header.token}",
                    )

                payment = Payment(
                    txId=header.tx_id,
                    network=requirements.network,
                    token=requirements.token,
                    amount=requirements.amount,
                    recipient=requirements.recipient,
                )
                settle_result = await self._facilitator.settle(payment)
                if not settle_result.success:
                    return self._payment_required(
                        requirements, error="Payment Invalid", reason=settle_result.error
                    )

                response = await func(request, *args, **kwargs)
                if not isinstance(response, Response):
                    response = JSONResponse(content=response)
                response.headers[PAYMENT_RESPONSE_HEADER] = encode_payment_payload(settle_result)
                return response

            return wrapper

        return decorator

    @staticmethod
    def _payment_required(
        requirements: PaymentRequirements,
        error: str = "Payment Required",
        reason: str | None = None,
    ) -> JSONResponse:
        """Return 402 payment required response"""
        body = create_payment_required_response(requirements, error=error, reason=reason)
        return JSONResponse(
            content=body.model_dump(by_alias=True, exclude_none=True),
            status_code=402,
        )


def x402_protected(
    amount: str | int,
    recipient: str,
    token: str = "sBTC",
    network: str = NetworkConfig.STACKS_MAINNET,
    facilitator: StacksFacilitator | None = None,
) -> Callable:
    """
    Convenience decorator to protect endpoints.

        @app.get("/premium")
        @x402_protected(amount="10000", recipient="SP...", token="sBTC")
        async def premium(request: Request):
            ...
    """
    return X402Middleware(facilitator).protect(
        amount=amount,
        recipient=recipient,
        token=token,
        network=network,
    )
