"""
Touch Driver - coordinate resolution for UI automation.

This package translates fractional or absolute touch positions into absolute
screen coordinates, relative to an element or to the whole device display.
"""

from touch_driver.exceptions import (
    DisplayQueryError,
    InvalidCoordinatesError,
    TouchDriverError,
)
from touch_driver.model import ZERO_POINT, Point, Rect
from touch_driver.position_helper import (
    PositionResult,
    get_absolute_position,
    get_device_abs_pos,
    get_element_abs_pos,
    resolve_absolute_position,
    translate_coordinate,
)

__version__ = "0.1.0"
__all__ = [
    "Point",
    "ZERO_POINT",
    "Rect",
    "PositionResult",
    "translate_coordinate",
    "get_absolute_position",
    "resolve_absolute_position",
    "get_element_abs_pos",
    "get_device_abs_pos",
    "TouchDriverError",
    "InvalidCoordinatesError",
    "DisplayQueryError",
]
