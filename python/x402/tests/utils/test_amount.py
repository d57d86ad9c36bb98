"""
Tests for fixed-point amount parsing and formatting.
"""

import pytest

from x402_stacks.exceptions import UnknownTokenError
from x402_stacks.tokens import TOKENS
from x402_stacks.utils import format_amount, parse_amount


class TestParseAmount:
    def test_sbtc_amounts(self):
        assert parse_amount("1", "sBTC") == 100000000
        assert parse_amount("0.1", "sBTC") == 10000000
        assert parse_amount("0.00000001", "sBTC") == 1
        assert parse_amount("1.5", "sBTC") == 150000000

    def test_stx_amounts(self):
        assert parse_amount("1", "STX") == 1000000
        assert parse_amount("0.1", "STX") == 100000
        assert parse_amount("0.000001", "STX") == 1

    def test_usdcx_amounts(self):
        assert parse_amount("12.34", "USDCx") == 12340000

    def test_default_token_is_sbtc(self):
        assert parse_amount("2") == 200000000

    def test_int_input(self):
        assert parse_amount(3, "STX") == 3000000

    def test_excess_precision_is_truncated(self):
        assert parse_amount("0.123456789", "sBTC") == 12345678
        assert parse_amount("0.0000019", "STX") == 1

    def test_missing_whole_part(self):
        assert parse_amount(".5", "STX") == 500000

    def test_trailing_point(self):
        assert parse_amount("7.", "STX") == 7000000

    def test_large_amount_is_exact(self):
        assert parse_amount("21000000.00000001", "sBTC") == 2100000000000001

    @pytest.mark.parametrize("value", ["", "abc", "1.2.3", "-1", "1e5", "0x10"])
    def test_invalid_strings(self, value):
        with pytest.raises(ValueError):
            parse_amount(value, "sBTC")

    def test_float_rejected(self):
        with pytest.raises(TypeError):
            parse_amount(0.1, "sBTC")

    def test_unknown_token(self):
        with pytest.raises(UnknownTokenError):
            parse_amount("1", "DOGE")


class TestFormatAmount:
    def test_sbtc_amounts(self):
        assert format_amount(100000000, "sBTC") == "1"
        assert format_amount(10000000, "sBTC") == "0.1"
        assert format_amount(1, "sBTC") == "0.00000001"
        assert format_amount(150000000, "sBTC") == "1.5"

    def test_stx_amounts(self):
        assert format_amount(1000000, "STX") == "1"
        assert format_amount(100000, "STX") == "0.1"

    def test_string_input(self):
        assert format_amount("10000", "sBTC") == "0.0001"

    @pytest.mark.parametrize("symbol", list(TOKENS))
    def test_zero_has_no_fraction(self, symbol):
        assert format_amount(0, symbol) == "0"

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            format_amount(-1, "sBTC")

    def test_float_rejected(self):
        with pytest.raises(TypeError):
            format_amount(1.9, "sBTC")
        with pytest.raises(TypeError):
            format_amount(100000000.0, "sBTC")

    def test_unknown_token(self):
        with pytest.raises(UnknownTokenError):
            format_amount(1, "DOGE")


@pytest.mark.parametrize("symbol", list(TOKENS))
@pytest.mark.parametrize(
    "value", [0, 1, 9, 10, 999999, 1000000, 100000001, 123456789012345678901234567890]
)
def test_parse_inverts_format(symbol, value):
    assert parse_amount(format_amount(value, symbol), symbol) == value
