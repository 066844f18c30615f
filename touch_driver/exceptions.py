"""Exceptions raised by the touch driver."""

from typing import Any


class TouchDriverError(Exception):
    """Base class for touch driver errors."""


class InvalidCoordinatesError(TouchDriverError):
    """
    Raised when a resolved point falls outside the rectangle it was checked against.

    Args:
        point: The computed absolute point.
        rect: The rectangle the point was checked against.
    """

    def __init__(self, point: Any, rect: Any):
        self.point = point
        self.rect = rect
        super().__init__(
            f"Coordinate {point} is outside of element rect: {rect.to_short_string()}"
        )

    def __reduce__(self):
        return (type(self), (self.point, self.rect))


class DisplayQueryError(TouchDriverError, RuntimeError):
    """Raised when a display backend cannot report the display size."""
