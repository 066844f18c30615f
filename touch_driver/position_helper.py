"""Translate relative or absolute touch positions into absolute screen coordinates."""

import logging
from dataclasses import dataclass

from touch_driver.display.base import DisplayInfo
from touch_driver.exceptions import InvalidCoordinatesError
from touch_driver.model import ZERO_POINT, Point, Rect

logger = logging.getLogger(__name__)


@dataclass
class PositionResult:
    """Resolved point, plus the bounds error when the check failed."""

    point: Point
    error: InvalidCoordinatesError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Point:
        """Return the point, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.point


def translate_coordinate(value: float, length: float, offset: float) -> float:
    """
    Translate one axis value into an absolute coordinate.

    Values strictly between -1 and 1 (except 0) are a fraction of `length`;
    anything else, including exactly 0 and +-1, is already absolute.

    Args:
        value: The position to translate.
        length: Length of side to use for fractional positions.
        offset: Position offset.

    Returns:
        The translated coordinate.
    """
    translated = length * value if 0 < abs(value) < 1 else value
    return translated + offset


def _out_of_bounds(point: Point, rect: Rect) -> bool:
    if not point.is_finite():
        return True
    x, y = point.as_ints()
    return not rect.contains(x, y)


def get_absolute_position(
    point: Point,
    rect: Rect,
    offsets: Point = ZERO_POINT,
    check_bounds: bool = False,
) -> Point:
    """
    Translate a point relative to a rectangle into absolute coordinates.

    Args:
        point: A point in relative or absolute coordinates.
        rect: The rectangle to which fractional coordinates are relative.
        offsets: X and Y values by which to offset the point. These are
            typically the absolute coordinates of the rectangle origin.
        check_bounds: Raise if the translated point is outside `rect`.

    Returns:
        The absolute point.

    Raises:
        InvalidCoordinatesError: If check_bounds is set and the point, truncated
            toward zero, is not inside `rect`.
    """
    absolute = Point(
        translate_coordinate(point.x, rect.width, offsets.x),
        translate_coordinate(point.y, rect.height, offsets.y),
    )
    if check_bounds and _out_of_bounds(absolute, rect):
        raise InvalidCoordinatesError(absolute, rect)
    return absolute


def resolve_absolute_position(
    point: Point,
    rect: Rect,
    offsets: Point = ZERO_POINT,
    check_bounds: bool = False,
) -> PositionResult:
    """Like get_absolute_position(), but report a bounds failure in the result."""
    try:
        return PositionResult(get_absolute_position(point, rect, offsets, check_bounds))
    except InvalidCoordinatesError as e:
        return PositionResult(e.point, e)


def get_element_abs_pos(
    point: Point, element_rect: Rect | str, check_bounds: bool = True
) -> Point:
    """
    Translate a point relative to an element into screen coordinates.

    Fractions are taken of the element size and offset by the element origin,
    so (0.5, 0.5) is the element centre.

    Args:
        point: Position inside the element.
        element_rect: Element rectangle, or its "[l,t][r,b]" bounds string.
        check_bounds: Raise if the result falls outside the element.
    """
    if isinstance(element_rect, str):
        element_rect = Rect.from_bounds_string(element_rect)

    # Absolute values are pixels from the element origin.
    offsets = Point(element_rect.left, element_rect.top)
    return get_absolute_position(point, element_rect, offsets, check_bounds)


def get_device_abs_pos(point: Point, display: DisplayInfo | None = None) -> Point:
    """
    Translate a point relative to the full device display.

    Args:
        point: Fractional or absolute display position.
        display: Display provider; defaults to the global display factory's.

    Returns:
        The absolute point, always bounds-checked against the display.
    """
    if display is None:
        from touch_driver.display_factory import get_display_factory

        display = get_display_factory().display

    display_rect = display.display_rect()
    logger.debug("Display bounds: %s", display_rect.to_short_string())
    return get_absolute_position(point, display_rect, ZERO_POINT, True)
