"""Binary wire codec for cube values.

Wire layout (big-endian, no padding)::

    header          int32    low 31 bits: dimension count, bit 31: point flag
    lower_left[n]   float64  one per axis
    upper_right[n]  float64  one per axis, omitted for points

These functions are stateless. They touch nothing but the buffer they are
given, so concurrent calls on distinct buffers need no locking.
"""

from __future__ import annotations

from typing import List, Optional

from loguru import logger

from ..exceptions import InvalidStructureError
from ..models.cube import Box, Cube, Point
from .buffer import CubeReader, CubeWriter

POINT_BIT = 0x80000000
DIM_MASK = 0x7FFFFFFF
HEADER_SIZE = 4
COORD_SIZE = 8

# Compiled-in limit of the database extension.
CUBE_MAX_DIM = 100


def payload_length(dimensions: int, point: bool) -> int:
    """Return the encoded size of a cube with the given shape, header included.

    Example:
        >>> from pgcube.codec.cube import payload_length
        >>> payload_length(3, point=True)
        28
    """
    coords = dimensions if point else dimensions * 2
    return HEADER_SIZE + COORD_SIZE * coords


def decode_cube(
    buffer: CubeReader,
    max_dimensions: Optional[int] = None,
    expected_length: Optional[int] = None,
) -> Cube:
    """Decode one cube from the current buffer position.

    The cursor advances by exactly ``encoded_length`` of the returned cube.
    Coordinate values are not validated: NaN and infinities pass through.
    Both structural checks run right after the header, so a rejected payload
    never has its coordinates read.

    Args:
        buffer: Buffer positioned at the start of an encoded cube
        max_dimensions: Upper bound on the declared dimension count.
            ``None`` disables the check.
        expected_length: Payload size announced by an enclosing length
            prefix. ``None`` disables the check.

    Returns:
        ``Point`` when the header's point flag is set, otherwise ``Box``

    Raises:
        InvalidStructureError: If the dimension count exceeds ``max_dimensions``
            or the header implies a size other than ``expected_length``
        BufferUnderflowError: Propagated from the buffer on truncated input

    Example:
        >>> from pgcube.codec.cube import decode_cube
        >>> from pgcube.codec.buffer import ReadBuffer
        >>> buf = ReadBuffer(bytes.fromhex("80000001" "3ff0000000000000"))
        >>> decode_cube(buf)
        Point(coordinates=(1.0,))
    """
    header = buffer.read_int32()
    dim = header & DIM_MASK
    point = (header & POINT_BIT) != 0

    if max_dimensions is not None and dim > max_dimensions:
        logger.debug("Rejecting cube header {:#010x}: {} dimensions", header & 0xFFFFFFFF, dim)
        raise InvalidStructureError(
            f"Cube declares {dim} dimensions, maximum is {max_dimensions}"
        )

    if expected_length is not None:
        actual = payload_length(dim, point)
        if actual != expected_length:
            logger.debug("Length prefix {} does not match payload size {}", expected_length, actual)
            raise InvalidStructureError(
                f"Length prefix says {expected_length} bytes, but cube payload is {actual} bytes"
            )

    lower_left = _read_coordinates(buffer, dim)
    if point:
        logger.trace("Decoded {}-dimensional point", dim)
        return Point(coordinates=lower_left)

    upper_right = _read_coordinates(buffer, dim)
    logger.trace("Decoded {}-dimensional box", dim)
    return Box(lower_left=lower_left, upper_right=upper_right)


def encoded_length(cube: Cube) -> int:
    """Return the exact number of bytes ``encode_cube`` writes for a cube.

    Example:
        >>> from pgcube.codec.cube import encoded_length
        >>> from pgcube.models.cube import Point
        >>> encoded_length(Point(coordinates=(1.0, 2.0, 3.0)))
        28
    """
    return payload_length(cube.dimensions, cube.is_point)


def encode_cube(cube: Cube, buffer: CubeWriter) -> None:
    """Write a cube at the current buffer position.

    Args:
        cube: Point or box to write; it is never modified
        buffer: Destination buffer

    Example:
        >>> from pgcube.codec.cube import encode_cube
        >>> from pgcube.codec.buffer import WriteBuffer
        >>> from pgcube.models.cube import Point
        >>> buf = WriteBuffer()
        >>> encode_cube(Point(coordinates=(1.0,)), buf)
        >>> buf.to_bytes().hex()
        '800000013ff0000000000000'
    """
    header = cube.dimensions
    if cube.is_point:
        # Signed int32 with bit 31 set.
        header -= POINT_BIT

    buffer.write_int32(header)
    for value in cube.lower_left:
        buffer.write_double(value)

    if cube.is_point:
        logger.trace("Encoded {}-dimensional point", cube.dimensions)
        return

    for value in cube.upper_right:
        buffer.write_double(value)
    logger.trace("Encoded {}-dimensional box", cube.dimensions)


def _read_coordinates(buffer: CubeReader, count: int) -> List[float]:
    return [buffer.read_double() for _ in range(count)]
