"""
Utility module for formatting and parsing user-facing values.
"""

from .formatters import format_currency, format_percentage, safe_parse_float

__all__ = ["format_currency", "format_percentage", "safe_parse_float"]
