"""Pydantic cube models for pgcube.

This module provides the Point and Box value types and the Cube union
that the codec reads and writes.
"""

from __future__ import annotations

from .cube import Box, Cube, Point, make_cube

__all__ = [
    "Box",
    "Cube",
    "Point",
    "make_cube",
]
