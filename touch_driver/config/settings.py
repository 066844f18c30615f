"""Driver settings built from the environment or a loaded config mapping."""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Mapping

ENV_PREFIX = "TOUCH_DRIVER_"
DEVICE_TYPES = ("adb", "u2", "static")


@dataclass
class DisplayConfig:
    """Settings for the display-size backend."""

    # one of DEVICE_TYPES
    device_type: str = "adb"
    device_id: str | None = None
    adb_path: str = "adb"
    query_timeout: float = 5.0


@dataclass
class DriverConfig:
    """Top-level driver settings."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    log_level: str = "INFO"

    @classmethod
    def from_mapping(cls, configs: Mapping[str, Any]) -> "DriverConfig":
        """
        Build settings from a flat mapping of TOUCH_DRIVER_* keys.

        Args:
            configs: Mapping such as os.environ or the result of load_config().

        Returns:
            DriverConfig with defaults for absent keys.

        Raises:
            ValueError: If the device type or log level is unknown, or the
                timeout is not a positive number.
        """
        display = DisplayConfig()

        device_type = configs.get(f"{ENV_PREFIX}DEVICE_TYPE")
        if device_type:
            display.device_type = str(device_type).lower()
            if display.device_type not in DEVICE_TYPES:
                raise ValueError(
                    f"{ENV_PREFIX}DEVICE_TYPE must be one of {list(DEVICE_TYPES)}, "
                    f"got {device_type!r}"
                )

        device_id = configs.get(f"{ENV_PREFIX}DEVICE_ID")
        if device_id:
            display.device_id = str(device_id)

        adb_path = configs.get(f"{ENV_PREFIX}ADB_PATH")
        if adb_path:
            display.adb_path = str(adb_path)

        timeout = configs.get(f"{ENV_PREFIX}QUERY_TIMEOUT")
        if timeout not in (None, ""):
            try:
                display.query_timeout = float(timeout)
            except (TypeError, ValueError):
                raise ValueError(
                    f"{ENV_PREFIX}QUERY_TIMEOUT must be a number, got {timeout!r}"
                ) from None
            if display.query_timeout <= 0:
                raise ValueError(f"{ENV_PREFIX}QUERY_TIMEOUT must be positive")

        log_level = str(configs.get(f"{ENV_PREFIX}LOG_LEVEL") or "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(
                f"{ENV_PREFIX}LOG_LEVEL must be a logging level name, got {log_level!r}"
            )
        return cls(display=display, log_level=log_level)


_driver_config: DriverConfig | None = None


def get_driver_config() -> DriverConfig:
    """
    Get settings built from the environment, reading it on first use.

    Raises:
        ValueError: If a TOUCH_DRIVER_* variable is invalid.
    """
    global _driver_config
    if _driver_config is None:
        _driver_config = DriverConfig.from_mapping(os.environ)
    return _driver_config


def reset_driver_config() -> None:
    """Forget the cached settings so the environment is read again."""
    global _driver_config
    _driver_config = None
