"""
Fixed-point amount conversion between decimal strings and smallest units.

All arithmetic is done on strings and Python ints; floats are rejected.
"""

from x402_stacks.tokens import TokenRegistry


def parse_amount(amount: str | int, token: str = "sBTC") -> int:
    """Parse a human-readable amount into the token's smallest unit.

    Fraction digits beyond the token's precision are truncated, not rounded:
    ``parse_amount("0.123456789", "sBTC") == 12345678``.

    Args:
        amount: Decimal string (e.g. "1.5") or whole-number int
        token: Token symbol (e.g. "sBTC", "STX")

    Returns:
        Amount in smallest units

    Raises:
        UnknownTokenError: If token is not registered
        TypeError: If amount is a float
        ValueError: If amount is not a non-negative decimal number
    """
    if isinstance(amount, float):
        raise TypeError("Float amounts are not supported, pass a decimal string")
    decimals = TokenRegistry.get_token(token).decimals

    text = str(amount).strip()
    whole, _, fraction = text.partition(".")
    if not whole and not fraction:
        raise ValueError(f"Invalid amount: {amount!r}")
    whole = whole or "0"
    if not whole.isdigit() or (fraction and not fraction.isdigit()):
        raise ValueError(f"Invalid amount: {amount!r}")

    padded_fraction = fraction.ljust(decimals, "0")[:decimals]
    return int(whole + padded_fraction)


def format_amount(amount: int | str, token: str = "sBTC") -> str:
    """Format a smallest-unit amount as a decimal string.

    Trailing fraction zeros are stripped and the decimal point is omitted for
    whole amounts: ``format_amount(150000000, "sBTC") == "1.5"``.

    Raises:
        UnknownTokenError: If token is not registered
        TypeError: If amount is a float
        ValueError: If amount is negative or not an integer
    """
    if isinstance(amount, float):
        raise TypeError("Float amounts are not supported, pass an int or digit string")
    decimals = TokenRegistry.get_token(token).decimals

    value = int(amount)
    if value < 0:
        raise ValueError(f"Amount must be non-negative: {amount!r}")
    if decimals == 0:
        return str(value)

    digits = str(value).rjust(decimals + 1, "0")
    whole = digits[:-decimals]
    fraction = digits[-decimals:].rstrip("0")
    return f"{whole}.{fraction}" if fraction else whole
