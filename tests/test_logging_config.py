"""Tests for stockmarket.logging_config.configure_logging."""

import logging
from contextlib import contextmanager

import pytest

from stockmarket.config import DispatcherConfig
from stockmarket.logging_config import configure_logging


@contextmanager
def bare_loggers():
    """Strip the root logger and reset the package loggers, restoring both afterwards."""
    root = logging.getLogger()
    package = logging.getLogger("stockmarket")
    events = logging.getLogger("stockmarket.events")
    saved_handlers = list(root.handlers)
    saved_levels = [(lg, lg.level) for lg in (root, package, events)]
    root.handlers.clear()
    root.setLevel(logging.WARNING)
    package.setLevel(logging.NOTSET)
    events.setLevel(logging.NOTSET)
    try:
        yield root
    finally:
        root.handlers[:] = saved_handlers
        for lg, level in saved_levels:
            lg.setLevel(level)


def test_config_level_applies_to_package_logger():
    with bare_loggers():
        package = configure_logging(DispatcherConfig(log_level="DEBUG"))
        assert package.name == "stockmarket"
        assert package.level == logging.DEBUG
        assert logging.getLogger("stockmarket.model.stock_event").getEffectiveLevel() == logging.DEBUG


def test_log_deliveries_opens_events_logger():
    with bare_loggers():
        configure_logging(DispatcherConfig(log_level="WARNING", log_deliveries=True))
        assert logging.getLogger("stockmarket").level == logging.WARNING
        assert logging.getLogger("stockmarket.events").getEffectiveLevel() == logging.DEBUG


def test_without_log_deliveries_events_inherit_package_level():
    with bare_loggers():
        configure_logging(DispatcherConfig(log_level="ERROR"))
        assert logging.getLogger("stockmarket.events").getEffectiveLevel() == logging.ERROR


def test_level_name_is_accepted():
    with bare_loggers():
        configure_logging("debug")
        assert logging.getLogger("stockmarket").level == logging.DEBUG


def test_unknown_level_name_raises():
    with bare_loggers():
        with pytest.raises(ValueError, match="log_level"):
            configure_logging("LOUD")


def test_defaults_to_info():
    with bare_loggers():
        configure_logging()
        assert logging.getLogger("stockmarket").level == logging.INFO


def test_installs_root_handler_when_unconfigured():
    with bare_loggers() as root:
        configure_logging(DispatcherConfig())
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
        assert root.level == logging.WARNING


def test_non_destructive_when_already_configured():
    with bare_loggers() as root:
        existing = logging.NullHandler()
        root.addHandler(existing)
        configure_logging(DispatcherConfig(log_level="DEBUG"))
        assert root.handlers == [existing]
        assert logging.getLogger("stockmarket").level == logging.DEBUG


def test_force_replaces_handlers():
    with bare_loggers() as root:
        root.addHandler(logging.NullHandler())
        configure_logging(DispatcherConfig(), force=True)
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
