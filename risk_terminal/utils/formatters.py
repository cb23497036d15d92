"""
Formatting and parsing helpers for displaying calculation results.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}

# Longest numeric prefix, as JavaScript's parseFloat reads it
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")

_CENT = Decimal("0.01")


def format_currency(value: float, currency: str = "USD") -> str:
    """
    Format a value as currency with two decimals and thousands grouping.

    Args:
        value: Amount to format
        currency: ISO currency code

    Returns:
        Formatted amount, e.g. "$1,234.56" or "-$1,234.56"
    """
    if not math.isfinite(value):
        return "N/A"

    code = currency.upper()
    symbol = CURRENCY_SYMBOLS.get(code, f"{code}\u00a0")

    amount = Decimal(str(abs(value))).quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""

    return f"{sign}{symbol}{amount:,.2f}"


def format_percentage(value: float, decimals: int = 2) -> str:
    """
    Format a percentage value with a fixed number of decimals.

    Args:
        value: Percentage value (12.5 means 12.5%)
        decimals: Number of decimal places

    Returns:
        Formatted percentage, e.g. "12.50%"
    """
    return f"{value:.{decimals}f}%"


def safe_parse_float(value: Union[str, int, float]) -> float:
    """
    Convert user input to a number, falling back to 0.

    Strings are read up to the first character that cannot continue a
    number, so "12.34.56" gives 12.34. Anything that is not a finite
    number gives 0.

    Args:
        value: Raw string or number

    Returns:
        Parsed finite number, or 0.0
    """
    if isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if match is None:
            return 0.0
        parsed = float(match.group(1))
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        parsed = float(value)
    else:
        return 0.0

    return parsed if math.isfinite(parsed) else 0.0
