"""
Pytest configuration file.

This module contains fixtures that can be used across all test files.
"""

import json

import pytest

from risk_terminal.trading.models import PositionInput, ProfitInput, TradeDirection


@pytest.fixture
def long_position_input():
    """Create a LONG position sizing input."""
    return PositionInput(
        direction=TradeDirection.LONG,
        entry_price=50000.0,
        stop_loss_price=49000.0,
        leverage=10.0,
        risk_amount=100.0,
    )


@pytest.fixture
def short_position_input():
    """Create a SHORT position sizing input."""
    return PositionInput(
        direction=TradeDirection.SHORT,
        entry_price=50000.0,
        stop_loss_price=51000.0,
        leverage=10.0,
        risk_amount=100.0,
    )


@pytest.fixture
def three_target_profit_input():
    """Create a LONG profit input with three take-profit targets."""
    return ProfitInput(
        direction=TradeDirection.LONG,
        entry_price=100.0,
        stop_loss_price=90.0,
        leverage=5.0,
        position_size=1200.0,
        take_profit_targets=[110.0, 120.0, 130.0],
    )


@pytest.fixture
def config_file(tmp_path):
    """Create a temporary configuration file for testing."""
    config = {
        "currency": "EUR",
        "percentage_decimals": 1,
        "default_leverage": 5.0,
        "max_take_profit_levels": 3,
        "log_level": "WARNING",
    }

    config_path = tmp_path / "config.json"
    with open(config_path, "w") as f:
        json.dump(config, f)

    return str(config_path)
