"""
Position size calculation.

This module converts a risk budget into a tradable quantity and the
margin required to open it under a given leverage.
"""

import logging

from risk_terminal.trading.models import PositionInput, PositionResult

logger = logging.getLogger(__name__)


def calculate_position_size(position_input: PositionInput) -> PositionResult:
    """
    Calculate the position size based on risk parameters.

    The position is sized so that hitting the stop loss loses exactly the
    risk amount. Leverage only changes the margin, never the size or the
    loss. Inputs are assumed to have passed validate_trading_parameters;
    an entry price equal to the stop loss is not guarded against here.

    Args:
        position_input: Direction, prices, leverage and risk amount

    Returns:
        Position size, margin, potential loss and risk percentage
    """
    entry_price = position_input.entry_price
    risk_amount = position_input.risk_amount

    # Absolute distance, so the same formula serves LONG and SHORT
    price_risk = abs(position_input.stop_loss_price - entry_price)
    risk_percentage = (price_risk / entry_price) * 100

    position_size = risk_amount / price_risk
    notional_value = position_size * entry_price
    margin = notional_value / position_input.leverage

    logger.debug(
        f"Calculated {position_input.direction.value} position size: {position_size} "
        f"(risk: {risk_amount:.2f}, price risk: {price_risk:.2f}, margin: {margin:.2f})"
    )

    return PositionResult(
        position_size=position_size,
        margin=margin,
        potential_loss=risk_amount,
        risk_percentage=risk_percentage,
    )
