"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from pgcube import Box, Point


@pytest.fixture
def sample_point() -> Point:
    """Three-dimensional point."""
    return Point(coordinates=(1.0, 2.0, 3.0))


@pytest.fixture
def sample_box() -> Box:
    """Unit square."""
    return Box(lower_left=(0.0, 0.0), upper_right=(1.0, 1.0))


@pytest.fixture
def sample_point_payload() -> bytes:
    """Wire encoding of ``sample_point``."""
    return bytes.fromhex(
        "80000003" "3ff0000000000000" "4000000000000000" "4008000000000000"
    )


@pytest.fixture
def sample_box_payload() -> bytes:
    """Wire encoding of ``sample_box``."""
    return bytes.fromhex(
        "00000002"
        "0000000000000000"
        "0000000000000000"
        "3ff0000000000000"
        "3ff0000000000000"
    )
