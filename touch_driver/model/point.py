"""Point value type used for touch coordinates."""

import math
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Point:
    """An immutable (x, y) pair of real coordinates."""

    x: float
    y: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Point":
        """
        Build a point from a JSON-style mapping.

        Args:
            data: Mapping with numeric "x" and "y" members.

        Returns:
            The point.

        Raises:
            ValueError: If a member is missing or not a number.
        """
        coords = []
        for key in ("x", "y"):
            if key not in data:
                raise ValueError(f"Point is missing '{key}': {dict(data)}")
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Point '{key}' must be a number, got {value!r}")
            coords.append(float(value))
        return cls(coords[0], coords[1])

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def as_ints(self) -> tuple[int, int]:
        """Truncate both coordinates toward zero."""
        return int(self.x), int(self.y)

    def __str__(self) -> str:
        return f"[x={self.x}, y={self.y}]"


ZERO_POINT = Point(0.0, 0.0)
