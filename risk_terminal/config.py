"""
Configuration for the risk terminal.

Settings are stored as a JSON file and validated on load.
"""

import json
import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from risk_terminal.trading.forms import MAX_TAKE_PROFIT_LEVELS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.json"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


class CalculatorConfig(BaseModel):
    """Display and input defaults for the calculators."""

    model_config = ConfigDict(extra="ignore")

    currency: str = "USD"
    percentage_decimals: int = Field(2, ge=0, le=8)
    default_leverage: float = Field(1.0, ge=1)
    max_take_profit_levels: int = Field(
        MAX_TAKE_PROFIT_LEVELS, ge=1, le=MAX_TAKE_PROFIT_LEVELS
    )
    log_level: str = "INFO"

    @field_validator("currency")
    @classmethod
    def check_currency(cls, value: str) -> str:
        value = value.strip().upper()
        if len(value) != 3 or not value.isalpha():
            raise ValueError(f"currency must be a 3-letter code, got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return value


def load_config(config_path: Optional[str] = None) -> CalculatorConfig:
    """
    Load the configuration from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        Loaded configuration, or the defaults if the file does not exist

    Raises:
        ConfigError: If the file is not valid JSON or has invalid values
    """
    config_path = config_path or DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        logger.debug(f"Configuration file not found: {config_path}, using defaults")
        return CalculatorConfig()

    try:
        with open(config_path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {config_path}: {str(e)}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {config_path} must be a JSON object")

    try:
        config = CalculatorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {str(e)}") from e

    logger.info(f"Loaded configuration from {config_path}")
    return config


def save_config(config: CalculatorConfig, config_path: Optional[str] = None) -> str:
    """
    Save the configuration to a JSON file.

    Args:
        config: Configuration to save
        config_path: Path to the configuration file

    Returns:
        Path the configuration was written to
    """
    config_path = config_path or DEFAULT_CONFIG_PATH

    config_dir = os.path.dirname(config_path)
    if config_dir:
        os.makedirs(config_dir, exist_ok=True)

    with open(config_path, "w") as f:
        json.dump(config.model_dump(), f, indent=2)

    logger.info(f"Configuration saved to {config_path}")
    return config_path
