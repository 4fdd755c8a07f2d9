"""In-memory cube values.

A cube is either a point (one corner) or an axis-aligned box (two corners).
The wire format packs that distinction into the high bit of the header; here it
is a plain union of two Pydantic models, so nothing outside the codec has to
know about bit masks.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# The header stores the dimension count in 31 bits.
MAX_COORDINATES = 0x7FFFFFFF

Coordinates = Tuple[float, ...]


class _CubeModel(BaseModel):
    """Shared Pydantic configuration for cube values."""

    model_config = ConfigDict(
        strict=False,
        frozen=True,
        extra="forbid",
    )


class Point(_CubeModel):
    """A zero-extent cube: both corners coincide.

    Only one coordinate array is stored and transmitted. ``upper_right`` is
    provided for symmetry with ``Box`` and returns the same coordinates.

    Example:
        >>> from pgcube.models.cube import Point
        >>> p = Point(coordinates=(1.0, 2.0, 3.0))
        >>> p.dimensions
        3
        >>> str(p)
        '(1, 2, 3)'
    """

    coordinates: Coordinates = Field(max_length=MAX_COORDINATES)

    @property
    def dimensions(self) -> int:
        return len(self.coordinates)

    @property
    def is_point(self) -> bool:
        return True

    @property
    def lower_left(self) -> Coordinates:
        return self.coordinates

    @property
    def upper_right(self) -> Coordinates:
        return self.coordinates

    def __str__(self) -> str:
        return _format_corner(self.coordinates)


class Box(_CubeModel):
    """An axis-aligned box given by two opposite corners.

    Attributes:
        lower_left: First corner, one coordinate per axis
        upper_right: Second corner, same length as ``lower_left``

    Example:
        >>> from pgcube.models.cube import Box
        >>> b = Box(lower_left=(0.0, 0.0), upper_right=(1.0, 1.0))
        >>> b.dimensions
        2
        >>> str(b)
        '(0, 0),(1, 1)'
    """

    lower_left: Coordinates = Field(max_length=MAX_COORDINATES)
    upper_right: Coordinates = Field(max_length=MAX_COORDINATES)

    @model_validator(mode="after")
    def check_corners(self) -> Box:
        if len(self.lower_left) != len(self.upper_right):
            raise ValueError(
                f"lower_left has {len(self.lower_left)} coordinates but "
                f"upper_right has {len(self.upper_right)}"
            )
        return self

    @property
    def dimensions(self) -> int:
        return len(self.lower_left)

    @property
    def is_point(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{_format_corner(self.lower_left)},{_format_corner(self.upper_right)}"


Cube = Union[Point, Box]


def make_cube(
    lower_left: Sequence[float], upper_right: Optional[Sequence[float]] = None
) -> Cube:
    """Build a cube, collapsing identical corners to a point.

    Args:
        lower_left: First corner
        upper_right: Opposite corner; omitted for a point

    Returns:
        ``Point`` when ``upper_right`` is omitted or equal to ``lower_left``,
        otherwise ``Box``

    Example:
        >>> from pgcube.models.cube import Point, make_cube
        >>> make_cube([1.0, 2.0], [1.0, 2.0])
        Point(coordinates=(1.0, 2.0))
    """
    lower = tuple(lower_left)
    if upper_right is None:
        return Point(coordinates=lower)

    upper = tuple(upper_right)
    if lower == upper:
        return Point(coordinates=lower)
    return Box(lower_left=lower, upper_right=upper)


def _format_coordinate(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _format_corner(coordinates: Coordinates) -> str:
    return "(" + ", ".join(_format_coordinate(c) for c in coordinates) + ")"
