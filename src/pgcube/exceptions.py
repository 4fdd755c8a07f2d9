"""Exception hierarchy for pgcube.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from CubeError for easy catching of any pgcube-specific error.
"""

from __future__ import annotations


class CubeError(Exception):
    """Base exception for all pgcube errors."""

    pass


class EncodeError(CubeError):
    """Raised when a cube cannot be written to the wire.

    Examples:
        - Dimension count above the configured maximum
    """

    pass


class DecodeError(CubeError):
    """Raised when decoding binary data fails.

    Examples:
        - Trailing bytes after a complete cube payload
        - Corrupted header
    """

    pass


class BufferUnderflowError(DecodeError):
    """Raised by a read buffer when fewer bytes remain than requested."""

    pass


class InvalidStructureError(DecodeError):
    """Raised when a payload is structurally impossible.

    Examples:
        - Declared dimension count above the configured maximum
        - Length prefix that disagrees with the decoded payload
    """

    pass


class InvalidCastError(CubeError, TypeError):
    """Raised when the type adapter is handed a value that is not a cube."""

    pass
