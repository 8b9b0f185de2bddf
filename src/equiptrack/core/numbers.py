"""Numeric helpers for user-entered and imported values.

Field values arrive in the Brazilian convention used by the spreadsheets
this tool exchanges data with: "." as thousands separator and "," as
decimal separator (e.g. "10.115,00").
"""

from __future__ import annotations

import math
import re

# Longest leading float literal, same acceptance as a lenient parseFloat
_FLOAT_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_float_value(value: str | float | int | None) -> float:
    """Parse a locale-formatted number, defaulting to 0.

    Strips every "." (thousands separator), turns the first "," into the
    decimal point and parses the leading numeric part. Never raises.

    Args:
        value: Raw cell or form value. Finite numbers are returned unchanged.

    Returns:
        Parsed float, or 0.0 when nothing numeric can be read.

    Examples:
        >>> parse_float_value("1.234,56")
        1234.56
        >>> parse_float_value("12 h")
        12.0
        >>> parse_float_value("abc")
        0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else 0.0

    sanitized = str(value).strip().replace(".", "").replace(",", ".", 1)
    return parse_leading_float(sanitized)


def parse_leading_float(text: str) -> float:
    """Parse the leading "."-decimal number in text.

    Trailing garbage is ignored ("12abc" -> 12). Empty, unreadable and
    non-finite values (overflowing exponents, "inf", "nan") give 0.
    """
    match = _FLOAT_PREFIX.match(text.strip())
    if match is None:
        return 0.0
    number = float(match.group(0))
    return number if math.isfinite(number) else 0.0


def format_number(value: float | int | None) -> str:
    """Format a number pt-BR style with at most two fraction digits.

    >>> format_number(1234.5)
    '1.234,5'
    >>> format_number(0)
    '0'
    """
    number = float(value or 0)
    text = f"{number:,.2f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    # swap separators: 1,234.5 -> 1.234,5
    return text.replace(",", "_").replace(".", ",").replace("_", ".")
