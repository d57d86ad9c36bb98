"""
Transaction Verification Utilities

Checks that a broadcast Stacks transaction pays the expected recipient at
least the expected amount of the expected token.
"""

import logging
import re
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from x402_stacks.exceptions import (
    InsufficientAmountError,
    MalformedTransferArgumentsError,
    RecipientMismatchError,
    TokenMismatchError,
    TransactionNotFoundError,
    TransactionNotSuccessfulError,
    TransferKindMismatchError,
    TransportError,
    VerificationError,
)
from x402_stacks.tokens import TokenRegistry
from x402_stacks.types import (
    SIP010_TRANSFER_FUNCTION,
    ContractCallTransaction,
    Payment,
    StacksTransaction,
    TokenTransferTransaction,
    VerifyResponse,
    parse_transaction,
)

_UINT_REPR = re.compile(r"^u(\d+)$")


class TransactionFetcher(Protocol):
    """Ledger indexer interface needed for verification"""

    async def get_transaction(self, tx_id: str) -> dict[str, Any] | None:
        """Return the transaction record, or None if it does not exist"""
        ...


def parse_uint_repr(value: str) -> int:
    """Parse a Clarity uint literal such as ``u1000``"""
    match = _UINT_REPR.match(value.strip())
    if match is None:
        raise MalformedTransferArgumentsError(f"expected uint amount, got {value!r}")
    return int(match.group(1))


def parse_principal_repr(value: str) -> str:
    """Strip Clarity quoting from a principal literal such as ``'SP2...``"""
    return value.replace("'", "").strip()


def _parse_required_amount(amount: str) -> int:
    text = amount.strip()
    if not text.isdigit():
        raise VerificationError(f"Invalid payment amount: {amount}")
    return int(text)


class StacksTransactionVerifier:
    """Verifies payment claims against transactions from the indexer"""

    def __init__(self, fetcher: TransactionFetcher) -> None:
        self._fetcher = fetcher
        self._logger = logging.getLogger(self.__class__.__name__)

    async def verify_transaction(self, payment: Payment) -> VerifyResponse:
        """
        Verify that a transaction satisfies a payment claim.

        This method checks:
        1. Transaction exists and succeeded on-chain
        2. Transfer kind matches the token (STX transfer or SIP-010 ``transfer`` call)
        3. Contract matches the token (SIP-010 only)
        4. Recipient matches exactly
        5. Amount is at least the required amount

        Never raises: every failure is returned as an invalid VerifyResponse.

        Args:
            payment: Payment claim to verify

        Returns:
            VerifyResponse
        """
        self._logger.info(
            "[EXPECTED] tx=%s | %s %s → %s",
            payment.tx_id,
            payment.amount,
            payment.token,
            payment.recipient,
        )
        try:
            required = _parse_required_amount(payment.amount)
            tx = await self._fetch(payment.tx_id)
            if not tx.is_successful:
                raise TransactionNotSuccessfulError(tx.tx_status)

            recipient, amount = self._extract_transfer(tx, payment.token)

            if recipient != payment.recipient:
                raise RecipientMismatchError(payment.recipient, recipient)
            if amount < required:
                raise InsufficientAmountError(amount, required)
        except VerificationError as e:
            self._logger.warning("[REJECTED] tx=%s: %s", payment.tx_id, e)
            return VerifyResponse(valid=False, error=str(e))
        except Exception as e:
            self._logger.error("Transaction verification error: %s", e, exc_info=True)
            return VerifyResponse(valid=False, error=str(TransportError(str(e))))

        self._logger.info("[OK] Payment verified: tx=%s amount=%s", payment.tx_id, amount)
        return VerifyResponse(valid=True, txId=payment.tx_id)

    async def _fetch(self, tx_id: str) -> StacksTransaction:
        try:
            data = await self._fetcher.get_transaction(tx_id)
        except httpx.HTTPError as e:
            self._logger.error("Indexer request failed for tx=%s: %s", tx_id, e, exc_info=True)
            raise TransportError(str(e) or e.__class__.__name__) from e
        except ValueError as e:
            self._logger.error("Malformed indexer response for tx=%s: %s", tx_id, e)
            raise TransportError(str(e)) from e

        if data is None:
            raise TransactionNotFoundError(tx_id)

        try:
            return parse_transaction(data)
        except ValidationError as e:
            self._logger.error("Unexpected transaction shape for tx=%s: %s", tx_id, e)
            raise TransportError(f"malformed transaction record ({e.error_count()} errors)") from e

    def _extract_transfer(self, tx: StacksTransaction, token: str) -> tuple[str, int]:
        """Return (recipient, amount) for the transfer kind *token* requires"""
        if TokenRegistry.is_native(token):
            if not isinstance(tx, TokenTransferTransaction):
                raise TransferKindMismatchError("Not a token transfer")
            try:
                amount = int(tx.token_transfer.amount)
            except ValueError as e:
                raise TransportError(f"invalid transfer amount {tx.token_transfer.amount!r}") from e
            return tx.token_transfer.recipient_address, amount

        if not isinstance(tx, ContractCallTransaction):
            raise TransferKindMismatchError("Not a contract call")

        call = tx.contract_call
        if call.function_name != SIP010_TRANSFER_FUNCTION:
            raise TransferKindMismatchError("Not a transfer function")

        if call.contract_id.lower() != token.lower():
            raise TokenMismatchError(token, call.contract_id)

        # SIP-010: (transfer (amount uint) (sender principal) (recipient principal) (memo (optional (buff 34))))
        args = call.function_args
        if not args or len(args) < 3:
            raise MalformedTransferArgumentsError()

        amount = parse_uint_repr(args[0].repr)
        recipient = parse_principal_repr(args[2].repr)
        return recipient, amount
