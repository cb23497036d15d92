"""
Profit and risk/reward metrics.

This module calculates the profit, ROI and risk/reward figures of a sized
position that is closed in equal shares across several take-profit
targets.
"""

import logging
from typing import List

from risk_terminal.trading.models import (
    ProfitInput,
    ProfitResult,
    TakeProfitBreakdown,
)

logger = logging.getLogger(__name__)


def _profit_fraction(profit_input: ProfitInput, target: float) -> float:
    """Signed price move from entry to target as a fraction of entry."""
    entry_price = profit_input.entry_price

    if profit_input.direction.is_long:
        return (target - entry_price) / entry_price

    return (entry_price - target) / entry_price


def calculate_profit_metrics(profit_input: ProfitInput) -> ProfitResult:
    """
    Calculate profit metrics for a position across its take-profit targets.

    The position is split into equal shares, one per valid (positive)
    target. A target on the wrong side of entry contributes nothing: it is
    left out of the per-target profits but still listed in the breakdown
    with zero profit. The potential loss is taken on the full position.

    Args:
        profit_input: Direction, prices, leverage, position size and targets

    Returns:
        Profit metrics and a per-target breakdown
    """
    position_size = profit_input.position_size

    # Fraction of entry, not a percentage
    risk_fraction = (
        abs(profit_input.stop_loss_price - profit_input.entry_price)
        / profit_input.entry_price
    )
    potential_loss = risk_fraction * position_size

    valid_targets = profit_input.valid_targets
    position_per_target = position_size / len(valid_targets) if valid_targets else 0

    profits: List[float] = []
    breakdown: List[TakeProfitBreakdown] = []

    for target in valid_targets:
        fraction = _profit_fraction(profit_input, target)
        profit = fraction * position_per_target if fraction > 0 else 0.0

        if fraction > 0:
            profits.append(profit)

        breakdown.append(
            TakeProfitBreakdown(
                price=target,
                profit=profit,
                risk_reward=profit / potential_loss if potential_loss > 0 else 0.0,
            )
        )

    total_profit = sum(profits)
    average_profit = total_profit / len(profits) if profits else 0.0

    margin = position_size / profit_input.leverage
    roi = (total_profit / margin) * 100 if margin > 0 else 0.0

    # Aggregate reward of every target against the full-position stop
    primary_risk_reward = total_profit / potential_loss if potential_loss > 0 else 0.0
    average_risk_reward = (
        average_profit / potential_loss if potential_loss > 0 else 0.0
    )

    if len(profits) != len(breakdown):
        logger.debug(
            f"{len(breakdown) - len(profits)} take profit target(s) on the wrong "
            f"side of entry {profit_input.entry_price} contribute no profit"
        )

    logger.debug(
        f"Calculated {profit_input.direction.value} profit metrics: "
        f"total {total_profit:.2f} over {len(profits)} target(s), "
        f"loss {potential_loss:.2f}, ROI {roi:.2f}%"
    )

    return ProfitResult(
        per_target_profits=profits,
        total_profit=total_profit,
        average_profit=average_profit,
        roi=roi,
        primary_risk_reward=primary_risk_reward,
        average_risk_reward=average_risk_reward,
        potential_loss=potential_loss,
        margin=margin,
        take_profit_breakdown=breakdown,
    )
