"""Axis-aligned integer rectangle, matching the platform rect semantics."""

import re
from dataclasses import dataclass

_BOUNDS_RE = re.compile(r"^\[(-?\d+),(-?\d+)\]\[(-?\d+),(-?\d+)\]$")


@dataclass(frozen=True)
class Rect:
    """Rectangle given by its left/top (inclusive) and right/bottom (exclusive) edges."""

    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def from_size(cls, width: int, height: int) -> "Rect":
        """Rectangle anchored at the origin."""
        return cls(0, 0, width, height)

    @classmethod
    def from_bounds_string(cls, bounds: str) -> "Rect":
        """
        Parse a uiautomator hierarchy bounds attribute such as "[0,63][1080,210]".

        Raises:
            ValueError: If the string is not in bounds format.
        """
        match = _BOUNDS_RE.match(bounds.replace(" ", ""))
        if not match:
            raise ValueError(f"Invalid bounds string: {bounds!r}")
        left, top, right, bottom = map(int, match.groups())
        return cls(left, top, right, bottom)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def is_empty(self) -> bool:
        return self.left >= self.right or self.top >= self.bottom

    def contains(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies inside; an empty rect contains nothing."""
        return (
            not self.is_empty()
            and self.left <= x < self.right
            and self.top <= y < self.bottom
        )

    def to_short_string(self) -> str:
        return f"[{self.left},{self.top}][{self.right},{self.bottom}]"
