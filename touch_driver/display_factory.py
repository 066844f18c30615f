"""Display factory for selecting the display-size backend by device type."""

from enum import Enum
from typing import Any

from touch_driver.config import get_driver_config
from touch_driver.display import DisplayInfo, get_display
from touch_driver.model import Point


class DeviceType(Enum):
    """Type of display-size backend."""

    ADB = "adb"
    U2 = "u2"
    STATIC = "static"


class DisplayFactory:
    """
    Factory class for getting the display provider of a device.

    This allows device-relative coordinates to be resolved through adb,
    uiautomator2, or a fixed size.
    """

    def __init__(
        self,
        device_type: DeviceType = DeviceType.ADB,
        device_id: str | None = None,
        **options: Any,
    ):
        """
        Initialize the display factory.

        Args:
            device_type: The backend to use.
            device_id: Optional device serial (ignored by the static backend).
            **options: Extra backend arguments, e.g. adb_path, timeout, width, height.
        """
        self.device_type = device_type
        self.device_id = device_id
        self.options = options
        self._display = None

    @property
    def display(self) -> DisplayInfo:
        """Get the display provider, creating it on first use."""
        if self._display is None:
            kwargs = dict(self.options)
            if self.device_type != DeviceType.STATIC:
                kwargs["device_id"] = self.device_id
            self._display = get_display(self.device_type.value, **kwargs)
        return self._display

    def display_width(self) -> int:
        """Get display width."""
        return self.display.display_width()

    def display_height(self) -> int:
        """Get display height."""
        return self.display.display_height()

    def get_device_abs_pos(self, point: Point) -> Point:
        """Translate a display-relative point through this factory's display."""
        from touch_driver.position_helper import get_device_abs_pos

        return get_device_abs_pos(point, self.display)


def _options_for(device_type: DeviceType, options: dict) -> dict:
    # Configured adb defaults fill in only what the caller left out.
    if device_type != DeviceType.ADB or {"adb_path", "timeout"} <= options.keys():
        return dict(options)
    display_config = get_driver_config().display
    return {
        "adb_path": display_config.adb_path,
        "timeout": display_config.query_timeout,
        **options,
    }


# Global display factory instance
_display_factory: DisplayFactory | None = None


def set_device_type(
    device_type: DeviceType, device_id: str | None = None, **options: Any
) -> DisplayFactory:
    """
    Set the global display backend.

    Args:
        device_type: The backend to use.
        device_id: Optional device serial.
        **options: Backend arguments; configured adb defaults apply for ADB.

    Returns:
        The new global display factory.
    """
    global _display_factory
    kwargs = _options_for(device_type, options)
    _display_factory = DisplayFactory(device_type, device_id, **kwargs)
    return _display_factory


def get_display_factory() -> DisplayFactory:
    """
    Get the global display factory instance.

    Returns:
        The display factory, built from the environment settings when not set yet.
    """
    global _display_factory
    if _display_factory is None:
        display_config = get_driver_config().display
        set_device_type(DeviceType(display_config.device_type), display_config.device_id)
    return _display_factory


def reset_display_factory() -> None:
    """Forget the global display factory."""
    global _display_factory
    _display_factory = None
