"""
Unit tests for path parameter parsing.
"""

import pytest

from api.src.utils.params import ParsedInt, parse_integer_param


class TestParseIntegerParam:
    """Tests for parse_integer_param."""

    @pytest.mark.parametrize("raw, expected", [
        ("0", 0),
        ("1", 1),
        ("42", 42),
        ("007", 7),
        ("+5", 5),
        ("-1", -1),
        ("123456789012", 123456789012),
        ("9223372036854775807", 9223372036854775807),
        ("-9223372036854775808", -9223372036854775808),
        ("000000000000000000000042", 42),
    ])
    def test_parses_integers(self, raw: str, expected: int):
        """Test valid integers are parsed to their value."""
        result = parse_integer_param(raw)

        assert result.ok
        assert result.value == expected
        assert result.raw == raw

    @pytest.mark.parametrize("raw", [
        "",
        "abc",
        "12abc",
        "1.5",
        " 1",
        "1 ",
        "1_000",
        "+",
        "-",
        "0x10",
        "١٢",
    ])
    def test_rejects_non_integers(self, raw: str):
        """Test malformed values are reported as failures."""
        result = parse_integer_param(raw)

        assert not result.ok
        assert result.value is None
        assert result.raw == raw

    @pytest.mark.parametrize("raw", [
        "9223372036854775808",
        "-9223372036854775809",
        "99999999999999999999",
        "1" * 5000,
        "-" + "9" * 5000,
    ])
    def test_rejects_values_outside_int64(self, raw: str):
        """Test integers beyond the signed 64-bit range are failures, not errors."""
        result = parse_integer_param(raw)

        assert not result.ok
        assert result.raw == raw

    def test_negative_one_is_a_value_not_a_failure(self):
        """Test -1 is distinguishable from a parse failure."""
        assert parse_integer_param("-1") == ParsedInt(raw="-1", value=-1)
        assert parse_integer_param("x") == ParsedInt(raw="x")
