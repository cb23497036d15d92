"""
Unit tests for the utils module.

This module contains tests for the formatting and parsing helpers.
"""

import pytest

from risk_terminal.utils.formatters import (
    format_currency,
    format_percentage,
    safe_parse_float,
)


class TestFormatCurrency:
    """Tests for format_currency."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1234.56, "$1,234.56"),
            (-1234.56, "-$1,234.56"),
            (0, "$0.00"),
            (1234.5678, "$1,234.57"),
            (100, "$100.00"),
            (1234567.89, "$1,234,567.89"),
            (0.01, "$0.01"),
            (2.675, "$2.68"),
        ],
    )
    def test_usd(self, value, expected):
        """Test formatting US dollar amounts."""
        assert format_currency(value) == expected

    def test_other_currencies(self):
        """Test formatting with other currency symbols."""
        assert format_currency(1234.5, "EUR") == "€1,234.50"
        assert format_currency(-3, "gbp") == "-£3.00"
        assert format_currency(10, "CHF") == "CHF\u00a010.00"

    def test_non_finite(self):
        """Test formatting values that are not numbers."""
        assert format_currency(float("inf")) == "N/A"
        assert format_currency(float("nan")) == "N/A"


class TestFormatPercentage:
    """Tests for format_percentage."""

    def test_default_decimals(self):
        """Test formatting with two decimals."""
        assert format_percentage(12.3456) == "12.35%"
        assert format_percentage(0) == "0.00%"
        assert format_percentage(-5.5) == "-5.50%"
        assert format_percentage(100) == "100.00%"

    def test_custom_decimals(self):
        """Test formatting with a custom number of decimals."""
        assert format_percentage(12.3456, 1) == "12.3%"
        assert format_percentage(12.3456, 0) == "12%"
        assert format_percentage(12.3456, 4) == "12.3456%"


class TestSafeParseFloat:
    """Tests for safe_parse_float."""

    def test_valid_strings(self):
        """Test parsing numeric strings."""
        assert safe_parse_float("123.45") == 123.45
        assert safe_parse_float("0") == 0
        assert safe_parse_float("-50.5") == -50.5
        assert safe_parse_float("  123  ") == 123
        assert safe_parse_float(".5") == 0.5

    def test_numeric_prefix(self):
        """Test that parsing stops at the first invalid character."""
        assert safe_parse_float("12.34.56") == 12.34
        assert safe_parse_float("42abc") == 42
        assert safe_parse_float("100 USD") == 100

    def test_scientific_notation(self):
        """Test parsing scientific notation."""
        assert safe_parse_float("1e5") == 100000
        assert safe_parse_float("1.5e-3") == pytest.approx(0.0015)

    @pytest.mark.parametrize(
        "value", ["abc", "", "   ", "Infinity", "-Infinity", "NaN", "1e999"]
    )
    def test_invalid_strings(self, value):
        """Test that unparseable or non-finite strings give 0."""
        assert safe_parse_float(value) == 0

    def test_numbers(self):
        """Test that finite numbers pass through."""
        assert safe_parse_float(123.45) == 123.45
        assert safe_parse_float(0) == 0
        assert safe_parse_float(-50) == -50

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_numbers(self, value):
        """Test that non-finite numbers give 0."""
        assert safe_parse_float(value) == 0

    def test_other_types(self):
        """Test that values that are not strings or numbers give 0."""
        assert safe_parse_float(None) == 0
        assert safe_parse_float(True) == 0
