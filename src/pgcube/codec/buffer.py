"""Byte-level read and write buffers.

The cube codec only needs four primitives from its surrounding protocol layer:
big-endian int32 and float64 reads and writes. ``CubeReader`` and ``CubeWriter``
describe that contract; ``ReadBuffer`` and ``WriteBuffer`` are the in-memory
implementations used by the convenience API, the CLI and the tests.
"""

from __future__ import annotations

import struct
from typing import Protocol

from ..exceptions import BufferUnderflowError

_INT32 = struct.Struct(">i")
_DOUBLE = struct.Struct(">d")

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


class CubeReader(Protocol):
    """Read side of the protocol buffer contract."""

    def read_int32(self) -> int: ...

    def read_double(self) -> float: ...


class CubeWriter(Protocol):
    """Write side of the protocol buffer contract."""

    def write_int32(self, value: int) -> None: ...

    def write_double(self, value: float) -> None: ...


class WriteBuffer:
    """Appends big-endian primitives to an in-memory byte buffer.

    Example:
        >>> from pgcube.codec.buffer import WriteBuffer
        >>> buf = WriteBuffer()
        >>> buf.write_int32(2)
        >>> buf.write_double(1.5)
        >>> buf.to_bytes().hex()
        '000000023ff8000000000000'
    """

    def __init__(self) -> None:
        """Initialize an empty write buffer."""
        self._buffer = bytearray()

    def write_int32(self, value: int) -> None:
        """Write a signed 32-bit integer.

        Args:
            value: Integer in the signed 32-bit range

        Raises:
            ValueError: If value does not fit in 32 bits
        """
        if value < INT32_MIN or value > INT32_MAX:
            raise ValueError(
                f"Value {value} doesn't fit in int32 (range: {INT32_MIN} to {INT32_MAX})"
            )
        self._buffer += _INT32.pack(value)

    def write_double(self, value: float) -> None:
        """Write an IEEE-754 double.

        Args:
            value: Float to write; NaN payloads and infinities are kept as-is
        """
        self._buffer += _DOUBLE.pack(value)

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes.

        Args:
            data: Bytes to append
        """
        self._buffer += data

    def bytes_written(self) -> int:
        """Return the number of bytes written so far."""
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return a copy of the buffer contents."""
        return bytes(self._buffer)


class ReadBuffer:
    """Reads big-endian primitives from a byte buffer.

    Each read advances an internal cursor. A read that would run past the end
    raises ``BufferUnderflowError`` and leaves the cursor where it was.

    Example:
        >>> from pgcube.codec.buffer import ReadBuffer
        >>> buf = ReadBuffer(bytes.fromhex("000000023ff8000000000000"))
        >>> buf.read_int32()
        2
        >>> buf.read_double()
        1.5
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a read buffer over the given data.

        Args:
            data: Byte buffer to read from
        """
        self._data = memoryview(bytes(data))
        self._position = 0

    def _take(self, num_bytes: int) -> memoryview:
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")

        remaining = len(self._data) - self._position
        if num_bytes > remaining:
            raise BufferUnderflowError(
                f"Not enough bytes: need {num_bytes}, have {remaining}"
            )

        chunk = self._data[self._position : self._position + num_bytes]
        self._position += num_bytes
        return chunk

    def read_int32(self) -> int:
        """Read a signed 32-bit integer.

        Raises:
            BufferUnderflowError: If fewer than 4 bytes remain
        """
        return _INT32.unpack(self._take(_INT32.size))[0]

    def read_double(self) -> float:
        """Read an IEEE-754 double.

        Raises:
            BufferUnderflowError: If fewer than 8 bytes remain
        """
        return _DOUBLE.unpack(self._take(_DOUBLE.size))[0]

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes.

        Args:
            num_bytes: Number of bytes to read

        Raises:
            BufferUnderflowError: If not enough bytes remain
        """
        return bytes(self._take(num_bytes))

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read position in bytes."""
        return self._position
