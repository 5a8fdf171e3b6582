"""Logging setup for applications embedding the stock event model."""

import logging
import sys

from stockmarket.config import DispatcherConfig

__all__ = ["PACKAGE_LOGGER", "configure_logging"]

PACKAGE_LOGGER = "stockmarket"


def configure_logging(
    config: DispatcherConfig | str | None = None, force: bool = False
) -> logging.Logger:
    """
    Apply a dispatcher config to the ``stockmarket`` loggers.

    The package logger always takes ``config.log_level``. When
    ``config.log_deliveries`` is set, ``stockmarket.events`` is opened up
    to DEBUG so per-handler delivery records get through.

    A stdout handler is installed on the root logger only if it has none,
    so an application's own logging setup is left alone unless ``force``
    is given.

    Args:
        config: Dispatcher config, or a bare level name (DEBUG, INFO, ...)
        force: If True, replace any existing root handlers

    Returns:
        The package logger.
    """
    if config is None:
        config = DispatcherConfig()
    elif isinstance(config, str):
        config = DispatcherConfig.from_raw({"log_level": config})

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(config.log_level)

    events_logger = logging.getLogger(f"{PACKAGE_LOGGER}.events")
    events_logger.setLevel(logging.DEBUG if config.log_deliveries else logging.NOTSET)

    root_logger = logging.getLogger()
    if root_logger.hasHandlers() and not force:
        return package_logger

    if force:
        root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    return package_logger
