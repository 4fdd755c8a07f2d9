"""pgcube: binary protocol codec for the database cube type

A Python library that reads and writes values of the ``cube`` extension type
(n-dimensional points and axis-aligned boxes) in the database's binary wire
format.

Key Features:
- Pydantic-based Point/Box value types
- Exact encoded-length calculation for framing
- Null-aware, length-prefixed parameter writes
- Pure Python implementation

Quick Start:
    >>> from pgcube import Box, Point, decode, encode
    >>> data = encode(Point(coordinates=(1.0, 2.0, 3.0)))
    >>> data[:4].hex()
    '80000003'
    >>> decode(data)
    Point(coordinates=(1.0, 2.0, 3.0))
    >>> box = Box(lower_left=(0.0, 0.0), upper_right=(1.0, 1.0))
    >>> len(encode(box))
    36
"""

from __future__ import annotations

from loguru import logger

from .codec import (
    CodecConfig,
    CubeCodec,
    ReadBuffer,
    WriteBuffer,
    decode,
    decode_cube,
    encode,
    encode_cube,
    encoded_length,
)
from .exceptions import (
    BufferUnderflowError,
    CubeError,
    DecodeError,
    EncodeError,
    InvalidCastError,
    InvalidStructureError,
)
from .models import Box, Cube, Point, make_cube
from .utils import encoded_bits, encoded_size, field_sizes, max_encoded_size

# Library code stays silent unless the application opts in.
logger.disable("pgcube")

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Cube",
    "Point",
    "Box",
    "make_cube",
    "encode",
    "decode",
    # Codec
    "CubeCodec",
    "CodecConfig",
    "decode_cube",
    "encode_cube",
    "encoded_length",
    # Buffers
    "ReadBuffer",
    "WriteBuffer",
    # Exceptions
    "CubeError",
    "EncodeError",
    "DecodeError",
    "BufferUnderflowError",
    "InvalidStructureError",
    "InvalidCastError",
    # Sizing
    "encoded_size",
    "encoded_bits",
    "field_sizes",
    "max_encoded_size",
    # Version
    "__version__",
]
