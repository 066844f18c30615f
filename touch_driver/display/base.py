"""Base interface for display-size providers."""

from abc import ABC, abstractmethod

from touch_driver.model import Rect


class DisplayInfo(ABC):
    """Interface for reporting the current display size of a device."""

    @abstractmethod
    def display_width(self) -> int:
        """Return the display width in pixels."""
        pass

    @abstractmethod
    def display_height(self) -> int:
        """Return the display height in pixels."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Return backend name."""
        pass

    def display_rect(self) -> Rect:
        """Return the full display rectangle anchored at the origin."""
        return Rect.from_size(self.display_width(), self.display_height())
