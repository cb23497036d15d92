"""
Input forms for the calculators.

These models coerce raw user input (strings or numbers) into calculator
inputs and reject values no calculation can use. Direction-aware checks
remain the job of validate_trading_parameters.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from risk_terminal.trading.models import PositionInput, ProfitInput, TradeDirection
from risk_terminal.utils.formatters import safe_parse_float

MAX_TAKE_PROFIT_LEVELS = 4


def _positive(value: Any, name: str) -> float:
    number = safe_parse_float(value)
    if number <= 0:
        raise ValueError(f"{name} must be greater than 0")
    return number


class _TradeForm(BaseModel):
    direction: TradeDirection = TradeDirection.LONG
    entry_price: float
    stop_loss: float
    leverage: float = 1.0

    @field_validator("direction", mode="before")
    @classmethod
    def parse_direction(cls, value: Any) -> TradeDirection:
        return TradeDirection.parse(value)

    @field_validator("entry_price", mode="before")
    @classmethod
    def check_entry_price(cls, value: Any) -> float:
        return _positive(value, "entry price")

    @field_validator("stop_loss", mode="before")
    @classmethod
    def check_stop_loss(cls, value: Any) -> float:
        return _positive(value, "stop loss")

    @field_validator("leverage", mode="before")
    @classmethod
    def check_leverage(cls, value: Any) -> float:
        return _positive(value, "leverage")

    @model_validator(mode="after")
    def check_distinct_prices(self):
        if self.entry_price == self.stop_loss:
            raise ValueError("entry price and stop loss cannot be the same")
        return self


class PositionForm(_TradeForm):
    """Raw input of the position size calculator."""

    risk_amount: float

    @field_validator("risk_amount", mode="before")
    @classmethod
    def check_risk_amount(cls, value: Any) -> float:
        return _positive(value, "risk amount")

    def to_input(self) -> PositionInput:
        return PositionInput(
            direction=self.direction,
            entry_price=self.entry_price,
            stop_loss_price=self.stop_loss,
            leverage=self.leverage,
            risk_amount=self.risk_amount,
        )


class ProfitForm(_TradeForm):
    """Raw input of the profit calculator."""

    position_size: float
    take_profit_levels: List[float] = []

    @field_validator("position_size", mode="before")
    @classmethod
    def check_position_size(cls, value: Any) -> float:
        return _positive(value, "position size")

    @field_validator("take_profit_levels", mode="before")
    @classmethod
    def check_take_profit_levels(cls, value: Any) -> List[float]:
        if value is None:
            return []
        if isinstance(value, (str, int, float)):
            value = [value]

        levels = [safe_parse_float(level) for level in value]
        if len(levels) > MAX_TAKE_PROFIT_LEVELS:
            raise ValueError(
                f"at most {MAX_TAKE_PROFIT_LEVELS} take profit levels are allowed"
            )
        return levels

    def to_input(self) -> ProfitInput:
        return ProfitInput(
            direction=self.direction,
            entry_price=self.entry_price,
            stop_loss_price=self.stop_loss,
            leverage=self.leverage,
            position_size=self.position_size,
            take_profit_targets=self.take_profit_levels,
        )


def form_errors(exc: ValidationError) -> List[str]:
    """
    Flatten a form validation error into readable messages.

    Args:
        exc: Validation error raised by a form

    Returns:
        One message per failed check, in the order they were found
    """
    messages = []
    for error in exc.errors():
        message = error["msg"]
        # pydantic prefixes messages raised from validators
        if message.startswith("Value error, "):
            message = message[len("Value error, ") :]
        if error["type"] == "missing":
            field_name = str(error["loc"][-1]).replace("_", " ")
            message = f"{field_name} is required"
        messages.append(message)
    return messages


POSITION_DEVELOPMENT_VALUES: Dict[str, Any] = {
    "direction": "LONG",
    "entry_price": 55000,
    "stop_loss": 54000,
    "risk_amount": 100,
    "leverage": 10,
}

POSITION_DEFAULT_VALUES: Dict[str, Any] = {
    "direction": "LONG",
    "entry_price": 0,
    "stop_loss": 0,
    "risk_amount": 0,
    "leverage": 1,
}

PROFIT_DEVELOPMENT_VALUES: Dict[str, Any] = {
    "direction": "LONG",
    "entry_price": 55000,
    "stop_loss": 54000,
    "position_size": 1000,
    "leverage": 10,
    "take_profit_levels": [59000, 62000, 69000, 72420],
}

PROFIT_DEFAULT_VALUES: Dict[str, Any] = {
    "direction": "LONG",
    "entry_price": 0,
    "stop_loss": 0,
    "position_size": 0,
    "leverage": 1,
    "take_profit_levels": [0],
}
