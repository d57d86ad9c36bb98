"""
Type definitions for x402 protocol on Stacks
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Discriminator, Field, Tag, TypeAdapter

# Transaction status reported by the indexer for confirmed, non-reverted txs
TX_STATUS_SUCCESS = "success"

TX_TYPE_TOKEN_TRANSFER = "token_transfer"
TX_TYPE_CONTRACT_CALL = "contract_call"
TX_TYPE_OTHER = "other"

# SIP-010 transfer entry point
SIP010_TRANSFER_FUNCTION = "transfer"


class PaymentRequirementsExtra(BaseModel):
    """Display metadata in payment requirements"""

    name: str
    decimals: int

    class Config:
        frozen = True


class PaymentRequirements(BaseModel):
    """Payment requirements returned with a 402 challenge"""

    network: str
    token: str
    amount: str
    recipient: str
    extra: Optional[PaymentRequirementsExtra] = None

    class Config:
        frozen = True


class PaymentRequired(BaseModel):
    """Payment required response (402)"""

    error: str = "Payment Required"
    reason: Optional[str] = None
    payment_requirements: PaymentRequirements = Field(alias="paymentRequirements")

    class Config:
        populate_by_name = True


class Payment(BaseModel):
    """Payment claim: a broadcast transaction expected to satisfy requirements"""

    tx_id: str = Field(alias="txId")
    network: str
    token: str
    amount: str
    recipient: str

    class Config:
        populate_by_name = True
        frozen = True


class PaymentHeader(BaseModel):
    """Decoded X-PAYMENT header sent by the client"""

    tx_id: str = Field(alias="txId")
    token: Optional[str] = None

    class Config:
        populate_by_name = True


class VerifyResponse(BaseModel):
    """Verification outcome"""

    valid: bool
    tx_id: Optional[str] = Field(None, alias="txId")
    error: Optional[str] = None

    class Config:
        populate_by_name = True
        frozen = True


class SettleResponse(BaseModel):
    """Settlement outcome"""

    success: bool
    tx_id: Optional[str] = Field(None, alias="txId")
    error: Optional[str] = None

    class Config:
        populate_by_name = True
        frozen = True

    @classmethod
    def from_verification(cls, result: VerifyResponse) -> "SettleResponse":
        """Settlement is final once the transaction is confirmed on-chain"""
        if result.valid:
            return cls(success=True, txId=result.tx_id)
        return cls(success=False, error=result.error)


class SupportedToken(BaseModel):
    """Token entry returned by get_tokens"""

    symbol: str
    address: str
    decimals: int


# ---------------------------------------------------------------------------
# Indexer transaction records
# ---------------------------------------------------------------------------


class TokenTransferPayload(BaseModel):
    """STX transfer payload"""

    recipient_address: str
    amount: str
    memo: Optional[str] = None


class FunctionArg(BaseModel):
    """Clarity function argument as rendered by the indexer"""

    repr: str
    name: Optional[str] = None
    type: Optional[str] = None
    hex: Optional[str] = None


class ContractCallPayload(BaseModel):
    """Contract call payload"""

    contract_id: str
    function_name: str
    function_signature: Optional[str] = None
    function_args: Optional[list[FunctionArg]] = None


class _BaseTransaction(BaseModel):
    tx_id: str
    tx_status: str
    sender_address: Optional[str] = None
    block_height: Optional[int] = None

    @property
    def is_successful(self) -> bool:
        return self.tx_status == TX_STATUS_SUCCESS


class TokenTransferTransaction(_BaseTransaction):
    """Native STX transfer"""

    tx_type: Literal["token_transfer"]
    token_transfer: TokenTransferPayload


class ContractCallTransaction(_BaseTransaction):
    """Smart contract invocation"""

    tx_type: Literal["contract_call"]
    contract_call: ContractCallPayload


class OtherTransaction(_BaseTransaction):
    """Any other transaction kind (contract deploy, coinbase, ...)"""

    tx_type: str


def _transaction_kind(value: Any) -> str:
    tx_type = value.get("tx_type") if isinstance(value, dict) else getattr(value, "tx_type", None)
    if tx_type in (TX_TYPE_TOKEN_TRANSFER, TX_TYPE_CONTRACT_CALL):
        return tx_type
    return TX_TYPE_OTHER


StacksTransaction = Annotated[
    Union[
        Annotated[TokenTransferTransaction, Tag(TX_TYPE_TOKEN_TRANSFER)],
        Annotated[ContractCallTransaction, Tag(TX_TYPE_CONTRACT_CALL)],
        Annotated[OtherTransaction, Tag(TX_TYPE_OTHER)],
    ],
    Discriminator(_transaction_kind),
]

_transaction_adapter: TypeAdapter[StacksTransaction] = TypeAdapter(StacksTransaction)


def parse_transaction(data: Any) -> StacksTransaction:
    """Parse an indexer transaction record into its kind-specific model.

    Raises:
        pydantic.ValidationError: If the record does not match its kind's shape
    """
    return _transaction_adapter.validate_python(data)
