"""
x402 Server SDK
"""

from x402_stacks.server.requirements import (
    create_payment_required_response,
    create_payment_requirements,
)

__all__ = ["create_payment_requirements", "create_payment_required_response"]
