"""Value types for touch coordinates."""

from touch_driver.model.point import ZERO_POINT, Point
from touch_driver.model.rect import Rect

__all__ = ["Point", "ZERO_POINT", "Rect"]
