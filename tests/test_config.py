"""Tests for stockmarket.config.DispatcherConfig."""

import pytest

from stockmarket.config import DispatcherConfig


class TestDispatcherConfigFromRaw:

    def test_empty_dict_gives_defaults(self):
        assert DispatcherConfig.from_raw({}) == DispatcherConfig()

    def test_defaults(self):
        cfg = DispatcherConfig()
        assert cfg.raise_handler_errors is False
        assert cfg.log_deliveries is False
        assert cfg.log_level == "INFO"

    def test_all_values(self):
        cfg = DispatcherConfig.from_raw(
            {"raise_handler_errors": True, "log_deliveries": True, "log_level": " debug "}
        )
        assert cfg.raise_handler_errors is True
        assert cfg.log_deliveries is True
        assert cfg.log_level == "DEBUG"

    def test_non_bool_flag_raises(self):
        with pytest.raises(ValueError, match="raise_handler_errors"):
            DispatcherConfig.from_raw({"raise_handler_errors": "yes"})

    def test_unknown_log_level_raises(self):
        with pytest.raises(ValueError, match="log_level"):
            DispatcherConfig.from_raw({"log_level": "LOUD"})

    def test_non_string_log_level_raises(self):
        with pytest.raises(ValueError, match="log_level"):
            DispatcherConfig.from_raw({"log_level": 10})
