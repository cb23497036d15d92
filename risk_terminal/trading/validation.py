"""
Validation of trade parameters.

Checks that entry, stop loss and take-profit prices are consistent with
the trade direction before any calculation is trusted. Every violated
rule is reported; nothing is raised.
"""

import logging
from typing import Optional, Sequence

from risk_terminal.trading.models import TradeDirection, ValidationResult

logger = logging.getLogger(__name__)


def validate_trading_parameters(
    direction: TradeDirection,
    entry_price: float,
    stop_loss_price: float,
    take_profit_targets: Optional[Sequence[float]] = None,
) -> ValidationResult:
    """
    Validate trade prices against the trade direction.

    Take-profit values that are zero or negative are treated as unset
    and skipped.

    Args:
        direction: Trade direction
        entry_price: Entry price
        stop_loss_price: Stop loss price
        take_profit_targets: Optional take-profit prices, in input order

    Returns:
        Validation result with every error found
    """
    direction = TradeDirection.parse(direction)
    targets = list(take_profit_targets or [])
    errors = []

    if entry_price <= 0:
        errors.append("Entry price must be positive")
    if stop_loss_price <= 0:
        errors.append("Stop loss must be positive")

    if direction.is_long:
        if stop_loss_price >= entry_price:
            errors.append("For LONG positions, stop loss must be below entry price")
        for index, tp in enumerate(targets):
            if 0 < tp <= entry_price:
                errors.append(
                    f"Take profit {index + 1} must be above entry price for LONG positions"
                )
    else:
        if stop_loss_price <= entry_price:
            errors.append("For SHORT positions, stop loss must be above entry price")
        for index, tp in enumerate(targets):
            if tp > 0 and tp >= entry_price:
                errors.append(
                    f"Take profit {index + 1} must be below entry price for SHORT positions"
                )

    # Levels are sorted into the direction's progression first, so only
    # repeated levels break it
    valid_targets = sorted(
        (tp for tp in targets if tp > 0), reverse=not direction.is_long
    )
    for current, following in zip(valid_targets, valid_targets[1:]):
        if direction.is_long and current >= following:
            errors.append(
                "Take profit levels must be in ascending order for LONG positions"
            )
            break
        if not direction.is_long and current <= following:
            errors.append(
                "Take profit levels must be in descending order for SHORT positions"
            )
            break

    if errors:
        logger.debug(
            f"Rejected {direction.value} trade (entry: {entry_price}, "
            f"stop: {stop_loss_price}): {'; '.join(errors)}"
        )

    return ValidationResult(errors=errors)
