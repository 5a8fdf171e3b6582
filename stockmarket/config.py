from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class DispatcherConfig:
    """Behaviour of an :class:`~stockmarket.events.EventDispatcher`.

    Attributes:
        raise_handler_errors: Re-raise the first handler exception instead of
            logging it and carrying on with the remaining handlers.
        log_deliveries: Emit a DEBUG record for every handler invocation.
        log_level: Level ``configure_logging`` sets on the ``stockmarket`` logger.
    """

    raise_handler_errors: bool = False
    log_deliveries: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> DispatcherConfig:
        """Validate and construct from a raw config dict.

        Missing keys take their defaults. Raises ``ValueError`` with a clear
        message on wrongly typed values or an unknown log level.
        """
        values: dict[str, Any] = {}
        for key in ("raise_handler_errors", "log_deliveries"):
            if key not in raw:
                continue
            if not isinstance(raw[key], bool):
                raise ValueError(f"dispatcher.{key} must be a boolean, got {raw[key]!r}")
            values[key] = raw[key]

        if "log_level" in raw:
            level = raw["log_level"]
            if not isinstance(level, str):
                raise ValueError(f"dispatcher.log_level must be a string, got {level!r}")
            level = level.strip().upper()
            if level not in _LOG_LEVELS:
                raise ValueError(
                    f"dispatcher.log_level must be one of {', '.join(_LOG_LEVELS)}, "
                    f"got {raw['log_level']!r}"
                )
            values["log_level"] = level

        return cls(**values)
