"""Unit tests for byte buffers."""

from __future__ import annotations

import math

import pytest

from pgcube import BufferUnderflowError, DecodeError
from pgcube.codec.buffer import ReadBuffer, WriteBuffer


class TestWriteBuffer:
    """Test WriteBuffer functionality."""

    def test_write_int32(self) -> None:
        """Test big-endian signed int32."""
        buf = WriteBuffer()
        buf.write_int32(2)
        buf.write_int32(-1)

        assert buf.bytes_written() == 8
        assert buf.to_bytes() == b"\x00\x00\x00\x02\xff\xff\xff\xff"

    def test_write_int32_bounds(self) -> None:
        """Test int32 range checking."""
        buf = WriteBuffer()
        buf.write_int32(-(2**31))
        buf.write_int32(2**31 - 1)

        with pytest.raises(ValueError, match="doesn't fit"):
            buf.write_int32(2**31)

        with pytest.raises(ValueError, match="doesn't fit"):
            buf.write_int32(-(2**31) - 1)

        assert buf.bytes_written() == 8

    def test_write_double(self) -> None:
        """Test big-endian double."""
        buf = WriteBuffer()
        buf.write_double(1.5)

        assert buf.to_bytes() == bytes.fromhex("3ff8000000000000")

    def test_write_bytes(self) -> None:
        """Test raw bytes."""
        buf = WriteBuffer()
        buf.write_bytes(b"\x12\x34")

        assert buf.to_bytes() == b"\x12\x34"

    def test_empty(self) -> None:
        """Test empty buffer."""
        assert WriteBuffer().to_bytes() == b""


class TestReadBuffer:
    """Test ReadBuffer functionality."""

    def test_read_primitives(self) -> None:
        """Test reading int32 and double."""
        buf = ReadBuffer(bytes.fromhex("80000003" "c000000000000000"))

        assert buf.read_int32() == -(2**31) + 3
        assert buf.read_double() == -2.0
        assert buf.bytes_remaining() == 0
        assert buf.position() == 12

    def test_read_infinity(self) -> None:
        """Test reading non-finite doubles."""
        buf = ReadBuffer(bytes.fromhex("7ff0000000000000" "fff0000000000000"))

        assert buf.read_double() == math.inf
        assert buf.read_double() == -math.inf

    def test_underflow(self) -> None:
        """Test reading past the end."""
        buf = ReadBuffer(b"\x00\x00\x00")

        with pytest.raises(BufferUnderflowError, match="need 4, have 3"):
            buf.read_int32()

        # Cursor does not move on failure
        assert buf.position() == 0
        assert buf.read_bytes(3) == b"\x00\x00\x00"

    def test_underflow_is_decode_error(self) -> None:
        """Test underflow is catchable as DecodeError."""
        with pytest.raises(DecodeError):
            ReadBuffer(b"").read_double()

    def test_read_bytes_negative(self) -> None:
        """Test invalid read size."""
        with pytest.raises(ValueError, match=">= 0"):
            ReadBuffer(b"\x00").read_bytes(-1)
