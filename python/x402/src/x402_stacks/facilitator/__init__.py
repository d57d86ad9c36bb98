"""
x402 Facilitator SDK
"""

from x402_stacks.facilitator.stacks_facilitator import (
    StacksFacilitator,
    facilitator,
    settle,
    verify,
)

__all__ = ["StacksFacilitator", "facilitator", "verify", "settle"]
