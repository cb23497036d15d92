"""
Trading risk management calculations.

Position sizing from a risk budget, profit analysis across take-profit
targets and validation of trade setups.
"""

from .trading import (
    TradeDirection,
    PositionInput,
    PositionResult,
    ProfitInput,
    ProfitResult,
    TakeProfitBreakdown,
    ValidationResult,
    calculate_position_size,
    calculate_profit_metrics,
    validate_trading_parameters,
)
from .utils import format_currency, format_percentage, safe_parse_float

__version__ = "0.1.0"

__all__ = [
    "TradeDirection",
    "PositionInput",
    "PositionResult",
    "ProfitInput",
    "ProfitResult",
    "TakeProfitBreakdown",
    "ValidationResult",
    "calculate_position_size",
    "calculate_profit_metrics",
    "validate_trading_parameters",
    "format_currency",
    "format_percentage",
    "safe_parse_float",
]
