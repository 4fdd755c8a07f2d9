"""Payload analysis CLI command."""

from __future__ import annotations

from ..codec.buffer import ReadBuffer
from ..codec.cube import POINT_BIT
from ..codec.handler import CubeCodec
from ..models.cube import Cube
from ..utils.sizing import encoded_size, field_sizes


def parse_hex(text: str) -> bytes:
    """Parse a hex string, ignoring whitespace and an optional ``0x`` or ``\\x`` prefix.

    Raises:
        ValueError: If the text is not valid hex
    """
    cleaned = "".join(text.split())
    for prefix in ("0x", "\\x"):
        if cleaned.lower().startswith(prefix):
            cleaned = cleaned[len(prefix) :]
            break
    return bytes.fromhex(cleaned)


def analyze_payload(data: bytes, codec: CubeCodec | None = None) -> Cube:
    """Decode a binary cube payload and print a layout breakdown.

    Args:
        data: Payload holding exactly one encoded cube
        codec: Codec to decode with; defaults to ``CubeCodec()``

    Returns:
        The decoded cube

    Raises:
        DecodeError: If the payload is malformed, truncated or has trailing bytes
    """
    codec = codec if codec is not None else CubeCodec()
    cube = codec.from_bytes(data)

    header = ReadBuffer(data).read_int32() & 0xFFFFFFFF
    form = "Point" if header & POINT_BIT else "Box"
    total_bytes = encoded_size(cube)
    sizes = field_sizes(cube)

    print("|" * 7, "pgcube: binary protocol codec for the database cube type", "|" * 7)
    plural = "s" if cube.dimensions != 1 else ""
    print(f"{'=' * 19} {form} ({cube.dimensions} dimension{plural}) {'=' * 19}")
    print(f"Encoded size: {total_bytes} bytes / {total_bytes * 8} bits")
    print()

    print(f"{'-' * 27} Header {'-' * 27}")
    _print_field("header", sizes["header"], f"{header:#010x}")
    print()

    print(f"{'-' * 28} Body {'-' * 28}")
    _print_field("lower_left", sizes["lower_left"])
    _print_coordinates(cube.lower_left)
    if not cube.is_point:
        _print_field("upper_right", sizes["upper_right"])
        _print_coordinates(cube.upper_right)
    print()

    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Text form: {cube}")
    print()

    return cube


def _print_field(name: str, bits: int, info: str = "") -> None:
    dots_needed = 54 - len(name) - len(str(bits)) - len(" bits")
    if info:
        dots_needed -= len(info) + 1
    dots = "." * max(1, dots_needed)
    suffix = f" {info}" if info else ""
    print(f"{name}{dots}{bits} bits{suffix}")


def _print_coordinates(coordinates: tuple[float, ...]) -> None:
    for i, value in enumerate(coordinates, 1):
        print(f"        {i}. {value!r}")
