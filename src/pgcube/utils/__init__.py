"""Utility functions for pgcube.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import encoded_bits, encoded_size, field_sizes, max_encoded_size

__all__ = [
    "encoded_size",
    "encoded_bits",
    "field_sizes",
    "max_encoded_size",
]
