"""Binary wire codec for pgcube.

This module provides encoding and decoding of cube values in the database's
binary protocol format.
"""

from __future__ import annotations

from ..models.cube import Cube
from .buffer import CubeReader, CubeWriter, ReadBuffer, WriteBuffer
from .config import CodecConfig
from .cube import (
    COORD_SIZE,
    CUBE_MAX_DIM,
    DIM_MASK,
    HEADER_SIZE,
    POINT_BIT,
    decode_cube,
    encode_cube,
    encoded_length,
    payload_length,
)
from .handler import NULL_LENGTH, CubeCodec

_default_codec = CubeCodec()


def encode(cube: Cube) -> bytes:
    """Encode a cube to its binary payload using the default codec.

    Example:
        >>> from pgcube.codec import encode
        >>> from pgcube.models.cube import Point
        >>> encode(Point(coordinates=(1.0,))).hex()
        '800000013ff0000000000000'
    """
    return _default_codec.to_bytes(cube)


def decode(data: bytes) -> Cube:
    """Decode a binary payload holding exactly one cube using the default codec."""
    return _default_codec.from_bytes(data)


__all__ = [
    "encode",
    "decode",
    "decode_cube",
    "encode_cube",
    "encoded_length",
    "payload_length",
    "CubeCodec",
    "CodecConfig",
    "CubeReader",
    "CubeWriter",
    "ReadBuffer",
    "WriteBuffer",
    "POINT_BIT",
    "DIM_MASK",
    "HEADER_SIZE",
    "COORD_SIZE",
    "CUBE_MAX_DIM",
    "NULL_LENGTH",
]
