"""Cube type handler for the protocol layer.

``CubeCodec`` wraps the wire functions in ``codec.cube`` with a configuration
and exposes the entry points a driver's parameter and row machinery calls:
length validation, null-aware writes with a length prefix, and matching reads.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from ..exceptions import DecodeError, EncodeError, InvalidCastError, InvalidStructureError
from ..models.cube import Box, Cube, Point
from .buffer import CubeReader, CubeWriter, ReadBuffer, WriteBuffer
from .config import CodecConfig
from .cube import HEADER_SIZE, decode_cube, encode_cube, encoded_length

# Length prefix the protocol uses for a NULL value.
NULL_LENGTH = -1


class CubeCodec:
    """Reads and writes cube values in the binary protocol format.

    The codec holds only its immutable configuration, so a single instance can
    be shared freely between threads as long as each call uses its own buffer.

    Attributes:
        config: Codec configuration (dimension bound)

    Examples:
        ```python
        from pgcube import CubeCodec, Point, ReadBuffer, WriteBuffer

        codec = CubeCodec()

        buf = WriteBuffer()
        codec.write_object_with_length(Point(coordinates=(1.0, 2.0)), buf)
        codec.write_object_with_length(None, buf)  # NULL

        reader = ReadBuffer(buf.to_bytes())
        codec.read_with_length(reader)  # Point(coordinates=(1.0, 2.0))
        codec.read_with_length(reader)  # None
        ```
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        """Initialize the codec.

        Args:
            config: Codec configuration. If None, uses default config.
        """
        self.config = config if config is not None else CodecConfig()

    # ------------------------------------------------------------------
    # Typed surface
    # ------------------------------------------------------------------

    def decode(self, buffer: CubeReader) -> Cube:
        """Decode one cube, enforcing ``config.max_dimensions``.

        Raises:
            InvalidStructureError: If the header declares too many dimensions
            BufferUnderflowError: Propagated from the buffer on truncated input
        """
        return decode_cube(buffer, max_dimensions=self.config.max_dimensions)

    def encoded_length(self, cube: Cube) -> int:
        """Return the exact encoded size of ``cube`` in bytes."""
        return encoded_length(cube)

    def validate_and_get_length(self, cube: Cube) -> int:
        """Check that ``cube`` can be written and return its encoded size.

        Raises:
            EncodeError: If the cube has more dimensions than the configuration allows
        """
        if cube.dimensions > self.config.max_dimensions:
            logger.debug(
                "Rejecting {}-dimensional cube (max {})",
                cube.dimensions,
                self.config.max_dimensions,
            )
            raise EncodeError(
                f"Cube has {cube.dimensions} dimensions, maximum is {self.config.max_dimensions}"
            )
        return encoded_length(cube)

    def encode(self, cube: Cube, buffer: CubeWriter) -> None:
        """Write ``cube`` without a length prefix."""
        encode_cube(cube, buffer)

    # ------------------------------------------------------------------
    # Untyped parameter surface
    # ------------------------------------------------------------------

    def validate_object_and_get_length(self, value: Optional[Cube]) -> int:
        """Return the payload length for a parameter value.

        ``None`` stands for SQL NULL and has no payload.

        Raises:
            InvalidCastError: If ``value`` is neither a cube nor None
            EncodeError: If the cube has too many dimensions
        """
        if value is None:
            return 0
        if isinstance(value, (Point, Box)):
            return self.validate_and_get_length(value)

        logger.debug("Refusing to write {} as a cube", type(value).__name__)
        raise InvalidCastError(
            f"Can't write Python type {type(value).__name__} with handler type CubeCodec"
        )

    def write_object_with_length(self, value: Optional[Cube], buffer: CubeWriter) -> None:
        """Write a parameter value preceded by its int32 length.

        None is written as the NULL marker (length -1, no payload). Validation
        happens before anything is written, so a rejected value leaves the
        buffer untouched.

        Raises:
            InvalidCastError: If ``value`` is neither a cube nor None
            EncodeError: If the cube has too many dimensions
        """
        length = self.validate_object_and_get_length(value)
        if value is None:
            buffer.write_int32(NULL_LENGTH)
            return

        buffer.write_int32(length)
        encode_cube(value, buffer)

    def read_with_length(self, buffer: CubeReader) -> Optional[Cube]:
        """Read a value written by ``write_object_with_length``.

        The prefix is checked against the cube header before any coordinate is
        read, so a bad prefix never moves the cursor past the declared payload.

        Returns:
            The decoded cube, or None for the NULL marker

        Raises:
            InvalidStructureError: If the length prefix disagrees with the payload
                or the header declares too many dimensions
            BufferUnderflowError: Propagated from the buffer on truncated input
        """
        length = buffer.read_int32()
        if length == NULL_LENGTH:
            return None

        if length < HEADER_SIZE:
            logger.debug("Length prefix {} cannot hold a cube header", length)
            raise InvalidStructureError(
                f"Length prefix says {length} bytes, but a cube needs at least {HEADER_SIZE}"
            )

        return decode_cube(
            buffer, max_dimensions=self.config.max_dimensions, expected_length=length
        )

    # ------------------------------------------------------------------
    # Async surface (no suspension points)
    # ------------------------------------------------------------------

    async def decode_async(self, buffer: CubeReader) -> Cube:
        """Async counterpart of ``decode``; completes without suspending."""
        return self.decode(buffer)

    async def write_object_with_length_async(
        self, value: Optional[Cube], buffer: CubeWriter
    ) -> None:
        """Async counterpart of ``write_object_with_length``; completes without suspending."""
        self.write_object_with_length(value, buffer)

    # ------------------------------------------------------------------
    # Bytes helpers
    # ------------------------------------------------------------------

    def to_bytes(self, cube: Cube) -> bytes:
        """Encode ``cube`` to a standalone payload (no length prefix).

        Raises:
            EncodeError: If the cube has too many dimensions
        """
        self.validate_and_get_length(cube)
        buffer = WriteBuffer()
        encode_cube(cube, buffer)
        return buffer.to_bytes()

    def from_bytes(self, data: bytes) -> Cube:
        """Decode a standalone payload that holds exactly one cube.

        Raises:
            DecodeError: If bytes remain after the cube
            InvalidStructureError: If the header declares too many dimensions
            BufferUnderflowError: If the payload is truncated
        """
        buffer = ReadBuffer(data)
        cube = self.decode(buffer)
        if buffer.bytes_remaining():
            raise DecodeError(
                f"{buffer.bytes_remaining()} trailing bytes after "
                f"{encoded_length(cube)}-byte cube payload"
            )
        return cube
