"""Layout configuration — grid geometry, width bounds, style lookback."""

from __future__ import annotations

from dataclasses import dataclass

LOOKBACK_ROW = "row"
LOOKBACK_IMAGE = "image"


class LayoutConfigError(ValueError):
    """Raised when layout parameters cannot produce a terminating layout."""


@dataclass
class LayoutConfig:
    """Controls grid sampling and block segmentation."""

    # Row height in image pixels, constant for the whole image
    block_height: int = 20
    # Grid column width; every block width is a multiple of it
    code_block_min_width: int = 10
    code_block_max_width: int = 60
    # Subtracted from rendered width and height
    padding: int = 4
    # Class-variation policy only
    style_variations_count: int = 3

    # "row" resets the previous-style lookback per row, "image" carries it across rows
    lookback: str = LOOKBACK_ROW

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.block_height <= 0:
            raise LayoutConfigError(f"block_height must be positive, got {self.block_height}")
        if self.code_block_min_width <= 0:
            raise LayoutConfigError(
                f"code_block_min_width must be positive, got {self.code_block_min_width}"
            )
        if self.code_block_min_width > self.code_block_max_width:
            raise LayoutConfigError(
                f"code_block_min_width ({self.code_block_min_width}) exceeds "
                f"code_block_max_width ({self.code_block_max_width})"
            )
        if self.padding < 0 or self.padding >= min(self.code_block_min_width, self.block_height):
            raise LayoutConfigError(
                f"padding must be in [0, {min(self.code_block_min_width, self.block_height)}), "
                f"got {self.padding}"
            )
        if self.style_variations_count < 1:
            raise LayoutConfigError(
                f"style_variations_count must be at least 1, got {self.style_variations_count}"
            )
        if self.lookback not in (LOOKBACK_ROW, LOOKBACK_IMAGE):
            raise LayoutConfigError(f"Unknown lookback scope: {self.lookback!r}")

    @property
    def width_units(self) -> int:
        """How many distinct block widths the [min, max] range admits."""
        return self.code_block_max_width // self.code_block_min_width
