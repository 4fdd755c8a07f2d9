#!/usr/bin/env python3
"""Basic usage example for pgcube.

This example demonstrates:
1. Building point and box cubes
2. Encoding to the binary wire format
3. Decoding back to Pydantic models
4. Writing length-prefixed parameters, including NULL
"""

from __future__ import annotations

from pgcube import (
    CubeCodec,
    ReadBuffer,
    WriteBuffer,
    decode,
    encode,
    encoded_size,
    field_sizes,
    make_cube,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("pgcube Basic Usage Example")
    print("=" * 60)
    print()

    # Build cubes
    print("1. Building cubes...")
    point = make_cube([1.0, 2.0, 3.0])
    box = make_cube([0.0, 0.0], [1.0, 1.0])
    print(f"   Point: {point}  ({point.dimensions} dimensions)")
    print(f"   Box:   {box}  ({box.dimensions} dimensions)")
    print()

    # Analyze sizes
    print("2. Analyzing wire sizes...")
    for cube in (point, box):
        sizes = field_sizes(cube)
        print(f"   {cube}: {sizes} -> {encoded_size(cube)} bytes")
    print()

    # Encode
    print("3. Encoding...")
    point_data = encode(point)
    box_data = encode(box)
    print(f"   Point: {point_data.hex()}")
    print(f"   Box:   {box_data.hex()}")
    print()

    # Decode
    print("4. Decoding...")
    print(f"   Point: {decode(point_data)!r}")
    print(f"   Box:   {decode(box_data)!r}")
    print()

    # Parameters with length prefix
    print("5. Writing length-prefixed parameters...")
    codec = CubeCodec()
    buf = WriteBuffer()
    for value in (point, None, box):
        codec.write_object_with_length(value, buf)
    print(f"   {buf.bytes_written()} bytes written")

    reader = ReadBuffer(buf.to_bytes())
    for _ in range(3):
        print(f"   Read back: {codec.read_with_length(reader)}")
    print()


if __name__ == "__main__":
    main()
