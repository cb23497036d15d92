"""
Trade inputs and calculation results.

This module defines the trade direction and the immutable input and
result records passed between the validator and the calculators.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Tuple


class TradeDirection(str, Enum):
    """Directional bias of a trade."""

    LONG = "LONG"
    SHORT = "SHORT"

    @classmethod
    def parse(cls, value: Any) -> "TradeDirection":
        """
        Parse a trade direction, ignoring case and surrounding whitespace.

        Args:
            value: Direction name or TradeDirection

        Returns:
            Matching TradeDirection

        Raises:
            ValueError: If the value names no direction
        """
        if isinstance(value, cls):
            return value

        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(
                f"Invalid trade direction: {value!r} (expected LONG or SHORT)"
            ) from None

    @property
    def is_long(self) -> bool:
        """Check if the direction is long."""
        return self is TradeDirection.LONG


@dataclass(frozen=True)
class PositionInput:
    """Parameters for sizing a position from a risk budget."""

    direction: TradeDirection
    entry_price: float
    stop_loss_price: float
    leverage: float
    risk_amount: float

    def __post_init__(self):
        object.__setattr__(self, "direction", TradeDirection.parse(self.direction))


@dataclass(frozen=True)
class PositionResult:
    """Result of a position size calculation."""

    position_size: float
    margin: float
    potential_loss: float
    risk_percentage: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class ProfitInput:
    """Parameters for analysing profit across take-profit targets."""

    direction: TradeDirection
    entry_price: float
    stop_loss_price: float
    leverage: float
    position_size: float
    take_profit_targets: Tuple[float, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "direction", TradeDirection.parse(self.direction))
        object.__setattr__(
            self, "take_profit_targets", tuple(self.take_profit_targets)
        )

    @property
    def valid_targets(self) -> List[float]:
        """Targets that are set (strictly positive), in input order."""
        return [tp for tp in self.take_profit_targets if tp > 0]


@dataclass(frozen=True)
class TakeProfitBreakdown:
    """Profit and risk/reward for a single take-profit target."""

    price: float
    profit: float
    risk_reward: float


@dataclass(frozen=True)
class ProfitResult:
    """Result of a profit metrics calculation."""

    per_target_profits: List[float]
    total_profit: float
    average_profit: float
    roi: float
    primary_risk_reward: float
    average_risk_reward: float
    potential_loss: float
    margin: float
    take_profit_breakdown: List[TakeProfitBreakdown] = field(default_factory=list)

    @property
    def share_per_target(self) -> float:
        """Fraction of the position closed at each target."""
        if not self.take_profit_breakdown:
            return 0.0
        return 1 / len(self.take_profit_breakdown)

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["share_per_target"] = self.share_per_target
        return result


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating trade parameters."""

    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if no rule was violated."""
        return not self.errors
