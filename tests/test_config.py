"""
Unit tests for the configuration module.
"""

import json

import pytest

from risk_terminal.config import (
    CalculatorConfig,
    ConfigError,
    load_config,
    save_config,
)


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test loading defaults when the file does not exist."""
        config = load_config(str(tmp_path / "missing.json"))

        assert config == CalculatorConfig()
        assert config.currency == "USD"
        assert config.percentage_decimals == 2
        assert config.default_leverage == 1.0
        assert config.max_take_profit_levels == 4
        assert config.log_level == "INFO"

    def test_load(self, config_file):
        """Test loading a configuration file."""
        config = load_config(config_file)

        assert config.currency == "EUR"
        assert config.percentage_decimals == 1
        assert config.default_leverage == 5.0
        assert config.max_take_profit_levels == 3
        assert config.log_level == "WARNING"

    def test_unknown_keys_ignored(self, tmp_path):
        """Test that unknown keys are ignored."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"currency": "gbp", "theme": "dark"}))

        config = load_config(str(config_path))

        assert config.currency == "GBP"
        assert not hasattr(config, "theme")

    def test_malformed_json(self, tmp_path):
        """Test loading a file that is not JSON."""
        config_path = tmp_path / "config.json"
        config_path.write_text("{not json")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(str(config_path))

    def test_not_an_object(self, tmp_path):
        """Test loading a JSON document that is not an object."""
        config_path = tmp_path / "config.json"
        config_path.write_text("[1, 2]")

        with pytest.raises(ConfigError, match="must be a JSON object"):
            load_config(str(config_path))

    @pytest.mark.parametrize(
        "values",
        [
            {"default_leverage": 0.5},
            {"percentage_decimals": -1},
            {"currency": "dollars"},
            {"log_level": "LOUD"},
            {"max_take_profit_levels": 0},
            {"max_take_profit_levels": 6},
        ],
    )
    def test_invalid_values(self, tmp_path, values):
        """Test rejecting invalid configuration values."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps(values))

        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(str(config_path))


class TestSaveConfig:
    """Tests for save_config."""

    def test_save_and_load(self, tmp_path):
        """Test saving a configuration and loading it back."""
        config_path = str(tmp_path / "nested" / "config.json")
        config = CalculatorConfig(currency="EUR", default_leverage=20)

        assert save_config(config, config_path) == config_path

        with open(config_path, "r") as f:
            data = json.load(f)

        assert data["currency"] == "EUR"
        assert data["default_leverage"] == 20
        assert load_config(config_path) == config
