"""
Tests for tunnel configuration
"""

import logging

import pytest
from pytunnel.config import ConfigValidationError, TunnelConfig


class TestTunnelConfig:
    """Defaults, conversion and validation"""

    def test_defaults_are_valid(self):
        config = TunnelConfig().validate()
        assert config.prefix == "%%"
        assert config.max_message_length == 150
        assert config.compress is True

    def test_dict_round_trip(self):
        config = TunnelConfig(prefix="##", max_message_length=80)
        assert TunnelConfig.from_dict(config.to_dict()) == config

    def test_from_dict_ignores_unknown_keys(self):
        config = TunnelConfig.from_dict({"prefix": "!t", "colour": "red"})
        assert config.prefix == "!t"

    def test_update(self):
        config = TunnelConfig()
        config.update(compress=False, unknown=1)
        assert config.compress is False
        assert not hasattr(config, "unknown")

    def test_log_level_normalised(self):
        assert TunnelConfig(log_level="debug").validate().log_level == "DEBUG"

    @pytest.mark.parametrize("changes", [
        {"prefix": ""},
        {"prefix": " %%"},
        {"prefix": "\u3400"},
        {"max_message_length": 3},
        {"max_message_length": "150"},
        {"prefix": "#########", "max_message_length": 10},
        {"compress_min_ratio": 0},
        {"compress_min_ratio": 1.5},
        {"max_payload_size": 0},
        {"max_payload_size": True},
        {"log_level": "LOUD"},
    ])
    def test_invalid(self, changes):
        config = TunnelConfig(**changes)
        with pytest.raises(ConfigValidationError):
            config.validate()

    def test_level(self):
        assert TunnelConfig().level == logging.INFO
        assert TunnelConfig(log_level="error").level == logging.ERROR
        assert TunnelConfig(log_level="error", debug=True).level == logging.DEBUG
