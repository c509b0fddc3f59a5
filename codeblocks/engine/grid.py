"""Grid builder — partition the image into fixed-height rows of min-width cells."""

from __future__ import annotations

import math
from dataclasses import dataclass

from codeblocks.engine.config import LayoutConfig
from codeblocks.engine.sampler import PixelSampler


@dataclass
class Column:
    """A grid cell or, after segmentation, a final block."""

    start_x: int
    start_y: int
    fill: bool
    block_width: int

    @property
    def end_x(self) -> int:
        return self.start_x + self.block_width


def grid_shape(image_width: int, image_height: int, config: LayoutConfig) -> tuple[int, int]:
    """(rows, columns) of whole cells; partial trailing cells are excluded."""
    rows = math.floor(image_height / config.block_height)
    columns = math.floor(image_width / config.code_block_min_width)
    return rows, columns


def build_row(sampler: PixelSampler, start_y: int, columns_count: int, config: LayoutConfig) -> list[Column]:
    """Sample one row left to right, one Column per cell."""
    step = config.code_block_min_width
    columns: list[Column] = []
    start_x = 0
    for _ in range(columns_count):
        fill = sampler.occupied(start_x, start_y, step, config.block_height)
        columns.append(Column(start_x=start_x, start_y=start_y, fill=fill, block_width=step))
        start_x += step
    return columns

