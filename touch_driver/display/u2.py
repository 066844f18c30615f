"""Display size reported by a uiautomator2 device connection."""

import logging
from typing import Any

import uiautomator2 as u2

from touch_driver.display.base import DisplayInfo
from touch_driver.exceptions import DisplayQueryError
from touch_driver.model import Rect

logger = logging.getLogger(__name__)


class U2Display(DisplayInfo):
    """
    Uses uiautomator2's window size, which follows the current rotation.

    Args:
        device_id: Device serial passed to u2.connect(); None picks the only device.
        device: An already connected uiautomator2 device to reuse.
    """

    def __init__(self, device_id: str | None = None, device: Any = None):
        self.device_id = device_id
        self._device = device

    @property
    def device(self) -> Any:
        """Connect lazily on first use."""
        if self._device is None:
            try:
                self._device = u2.connect(self.device_id)
            except Exception as e:
                raise DisplayQueryError(
                    f"Failed to connect to device {self.device_id or '(default)'}: {e}"
                ) from e
        return self._device

    def display_width(self) -> int:
        return self.display_size()[0]

    def display_height(self) -> int:
        return self.display_size()[1]

    def display_rect(self) -> Rect:
        width, height = self.display_size()
        return Rect.from_size(width, height)

    def display_size(self) -> tuple[int, int]:
        """Return (width, height) from window_size()."""
        device = self.device
        try:
            width, height = device.window_size()
        except Exception as e:
            raise DisplayQueryError(f"Failed to get window size: {e}") from e

        logger.debug("uiautomator2 reported window size %dx%d", width, height)
        return int(width), int(height)

    def get_name(self) -> str:
        return "u2"
