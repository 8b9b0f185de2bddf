"""Tests for numeric parsing and formatting.

Values follow the Brazilian convention: "." groups thousands,
"," separates decimals.
"""

import pytest

from equiptrack.core.numbers import format_number, parse_float_value, parse_leading_float


class TestParseFloatValue:
    """Test parse_float_value."""

    def test_thousands_and_decimal_separators(self):
        """'1.234,56' parses as 1234.56."""
        assert parse_float_value("1.234,56") == pytest.approx(1234.56)

    def test_empty_string_is_zero(self):
        """Empty input yields 0."""
        assert parse_float_value("") == 0

    def test_whitespace_only_is_zero(self):
        """Blank input yields 0."""
        assert parse_float_value("   ") == 0

    def test_non_numeric_is_zero(self):
        """Unparsable input yields 0, never an error."""
        assert parse_float_value("abc") == 0

    def test_none_is_zero(self):
        """None yields 0."""
        assert parse_float_value(None) == 0

    def test_plain_integer(self):
        """Integers parse unchanged."""
        assert parse_float_value("42") == 42

    def test_comma_decimal(self):
        """'10,5' parses as 10.5."""
        assert parse_float_value("10,5") == pytest.approx(10.5)

    def test_negative_value(self):
        """Sign is kept."""
        assert parse_float_value("-3,25") == pytest.approx(-3.25)

    def test_leading_number_with_suffix(self):
        """Trailing text after the number is ignored."""
        assert parse_float_value("12 h") == 12

    def test_decimal_point_is_treated_as_grouping(self):
        """A dot decimal is read as a thousands separator (known lossy case)."""
        assert parse_float_value("10.5") == 105

    def test_numbers_pass_through(self):
        """Numeric values are returned unchanged."""
        assert parse_float_value(7.25) == 7.25
        assert parse_float_value(3) == 3.0

    def test_booleans_are_zero(self):
        """Booleans are not treated as numbers."""
        assert parse_float_value(True) == 0

    def test_non_finite_is_zero(self):
        """Overflowing or non-finite values yield 0."""
        assert parse_float_value("1e999") == 0
        assert parse_float_value("inf") == 0
        assert parse_float_value(float("nan")) == 0
        assert parse_float_value(float("inf")) == 0


class TestFormatNumber:
    """Test pt-BR number formatting."""

    def test_thousands_and_decimals(self):
        assert format_number(1234.5) == "1.234,5"

    def test_rounds_to_two_digits(self):
        assert format_number(2.0 / 3.0) == "0,67"

    def test_integer_has_no_fraction(self):
        assert format_number(100) == "100"

    def test_zero_and_none(self):
        assert format_number(0) == "0"
        assert format_number(None) == "0"

    def test_large_number(self):
        assert format_number(1234567.891) == "1.234.567,89"


class TestParseLeadingFloat:
    """Test parse_leading_float ("." decimals, no grouping)."""

    def test_plain_decimal(self):
        assert parse_leading_float("5.89") == 5.89

    def test_trailing_text_ignored(self):
        assert parse_leading_float("12abc") == 12

    def test_unreadable_and_non_finite(self):
        assert parse_leading_float("") == 0
        assert parse_leading_float("abc") == 0
        assert parse_leading_float("nan") == 0
        assert parse_leading_float("inf") == 0
