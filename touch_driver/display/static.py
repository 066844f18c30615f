"""Display provider with a fixed, known size."""

from touch_driver.display.base import DisplayInfo


class StaticDisplay(DisplayInfo):
    """
    Reports a fixed display size.

    Useful when the size is already known, e.g. from a screenshot.
    """

    def __init__(self, width: int = 1080, height: int = 2400):
        if width < 0 or height < 0:
            raise ValueError(f"Display size must be non-negative: {width}x{height}")
        self.width = int(width)
        self.height = int(height)

    def display_width(self) -> int:
        return self.width

    def display_height(self) -> int:
        return self.height

    def get_name(self) -> str:
        return "static"
