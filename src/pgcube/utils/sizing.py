"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of cubes
without actually encoding them.
"""

from __future__ import annotations

from ..codec.cube import COORD_SIZE, HEADER_SIZE, encoded_length, payload_length
from ..models.cube import Cube


def encoded_size(cube: Cube) -> int:
    """Calculate the encoded size of a cube in bytes.

    Args:
        cube: Point or box to measure

    Returns:
        Size in bytes, header included

    Example:
        >>> from pgcube.utils.sizing import encoded_size
        >>> from pgcube.models.cube import Box
        >>> encoded_size(Box(lower_left=(0.0, 0.0), upper_right=(1.0, 1.0)))
        36
    """
    return encoded_length(cube)


def encoded_bits(cube: Cube) -> int:
    """Calculate the encoded size of a cube in bits.

    Example:
        >>> from pgcube.utils.sizing import encoded_bits
        >>> from pgcube.models.cube import Point
        >>> encoded_bits(Point(coordinates=(1.0, 2.0, 3.0)))
        224
    """
    return encoded_length(cube) * 8


def max_encoded_size(dimensions: int, point: bool = False) -> int:
    """Calculate the encoded size of any cube with the given shape.

    Useful for sizing buffers before the cube itself is available.

    Args:
        dimensions: Number of axes
        point: True for point form, False for box form

    Returns:
        Size in bytes

    Raises:
        ValueError: If dimensions is negative

    Example:
        >>> from pgcube.utils.sizing import max_encoded_size
        >>> max_encoded_size(3, point=True)
        28
        >>> max_encoded_size(3)
        52
    """
    if dimensions < 0:
        raise ValueError(f"dimensions must be >= 0, got {dimensions}")

    return payload_length(dimensions, point)


def field_sizes(cube: Cube) -> dict[str, int]:
    """Get the size in bits of each wire field of a cube.

    Args:
        cube: Point or box to analyze

    Returns:
        Dictionary mapping field names to their size in bits, in wire order.
        ``upper_right`` is 0 for points.

    Example:
        >>> from pgcube.utils.sizing import field_sizes
        >>> from pgcube.models.cube import Point
        >>> field_sizes(Point(coordinates=(1.0, 2.0)))
        {'header': 32, 'lower_left': 128, 'upper_right': 0}
    """
    corner_bits = cube.dimensions * COORD_SIZE * 8
    return {
        "header": HEADER_SIZE * 8,
        "lower_left": corner_bits,
        "upper_right": 0 if cube.is_point else corner_bits,
    }
