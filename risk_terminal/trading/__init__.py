"""
Trading module for position sizing and risk calculation.

This module provides functionality for validating trade setups,
calculating position sizes based on risk parameters, and analysing
profit across take-profit targets.
"""

from .models import (
    TradeDirection,
    PositionInput,
    PositionResult,
    ProfitInput,
    ProfitResult,
    TakeProfitBreakdown,
    ValidationResult,
)
from .validation import validate_trading_parameters
from .position import calculate_position_size
from .metrics import calculate_profit_metrics

__all__ = [
    "TradeDirection",
    "PositionInput",
    "PositionResult",
    "ProfitInput",
    "ProfitResult",
    "TakeProfitBreakdown",
    "ValidationResult",
    "validate_trading_parameters",
    "calculate_position_size",
    "calculate_profit_metrics",
]
