"""Unit tests for size calculation utilities."""

from __future__ import annotations

import pytest

from pgcube import Box, Point, encode, encoded_bits, encoded_size, field_sizes, max_encoded_size


class TestSizeCalculation:
    """Test size calculation utilities."""

    def test_encoded_size(self, sample_point: Point, sample_box: Box) -> None:
        assert encoded_size(sample_point) == 28
        assert encoded_size(sample_box) == 36

    def test_encoded_bits(self, sample_box: Box) -> None:
        assert encoded_bits(sample_box) == 288

    def test_field_sizes_point(self, sample_point: Point) -> None:
        assert field_sizes(sample_point) == {"header": 32, "lower_left": 192, "upper_right": 0}

    def test_field_sizes_box(self, sample_box: Box) -> None:
        sizes = field_sizes(sample_box)
        assert sizes == {"header": 32, "lower_left": 128, "upper_right": 128}
        assert sum(sizes.values()) == encoded_bits(sample_box)

    def test_max_encoded_size(self, sample_point: Point, sample_box: Box) -> None:
        assert max_encoded_size(3, point=True) == len(encode(sample_point))
        assert max_encoded_size(2) == len(encode(sample_box))
        assert max_encoded_size(0) == 4

    def test_max_encoded_size_negative(self) -> None:
        with pytest.raises(ValueError, match="dimensions"):
            max_encoded_size(-1)
