"""Configuration for the touch driver."""

from touch_driver.config.settings import (
    DisplayConfig,
    DriverConfig,
    get_driver_config,
    reset_driver_config,
)

__all__ = ["DisplayConfig", "DriverConfig", "get_driver_config", "reset_driver_config"]
