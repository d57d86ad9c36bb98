"""
x402 custom exception hierarchy
"""


class X402Error(Exception):
    """x402 base exception"""

    pass


class ConfigurationError(X402Error):
    """Configuration-related error"""

    pass


class UnsupportedNetworkError(ConfigurationError):
    """Unsupported network"""

    pass


class UnknownTokenError(ConfigurationError):
    """Unknown token"""

    pass


class VerificationError(X402Error):
    """Payment verification failed.

    Subclasses describe one way a claimed transaction can fail to satisfy a
    payment. Their message is reported verbatim as the verification reason.
    """

    pass


class TransactionNotFoundError(VerificationError):
    """Transaction reference could not be resolved by the indexer"""

    def __init__(self, tx_id: str):
        self.tx_id = tx_id
        super().__init__(f"Transaction not found: {tx_id}")


class TransactionNotSuccessfulError(VerificationError):
    """Transaction exists but failed or was reverted on-chain"""

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Transaction not successful: {status}")


class TransferKindMismatchError(VerificationError):
    """Transaction is not the expected kind of transfer"""

    pass


class TokenMismatchError(VerificationError):
    """Transaction moved a different token than requested"""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Token mismatch: expected {expected}, got {actual}")


class RecipientMismatchError(VerificationError):
    """Transaction paid a different recipient"""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Recipient mismatch: expected {expected}, got {actual}")


class InsufficientAmountError(VerificationError):
    """Transaction paid less than the required amount"""

    def __init__(self, actual: int, required: int):
        self.actual = actual
        self.required = required
        super().__init__(f"Amount insufficient: got {actual}, need {required}")


class MalformedTransferArgumentsError(VerificationError):
    """Contract call arguments are missing or unparseable"""

    def __init__(self, detail: str | None = None):
        self.detail = detail
        message = "Invalid transfer arguments"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class TransportError(VerificationError):
    """Indexer request or response decoding failed"""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Verification failed: {detail}")
