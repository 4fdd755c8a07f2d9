"""Configuration for the cube codec."""

from __future__ import annotations

from dataclasses import dataclass

from .cube import CUBE_MAX_DIM, DIM_MASK


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for ``CubeCodec``.

    Attributes:
        max_dimensions: Largest dimension count accepted on decode and on the
            validating write path (default 100, the database extension's own
            limit). Decoding checks it before allocating coordinate arrays, so
            a corrupted header cannot trigger a huge allocation. The ceiling is
            0x7fffffff, the largest count the 31-bit header field can carry.

    Examples:
        ```python
        from pgcube import CodecConfig, CubeCodec

        codec = CubeCodec(CodecConfig(max_dimensions=3))
        ```
    """

    max_dimensions: int = CUBE_MAX_DIM

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 0 <= self.max_dimensions <= DIM_MASK:
            raise ValueError(
                f"max_dimensions must be 0-{DIM_MASK}, got {self.max_dimensions}"
            )
