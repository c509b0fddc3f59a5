"""Layout orchestrator — runs sample → merge → segment → style, row by row."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Hashable, Sequence

import numpy as np

from codeblocks.engine.config import LOOKBACK_ROW, LayoutConfig
from codeblocks.engine.grid import Column, build_row, grid_shape
from codeblocks.engine.merge import merge_row_columns
from codeblocks.engine.registry import get_registry
from codeblocks.engine.sampler import PixelSampler, SamplerUnavailableError
from codeblocks.engine.segment import segment_column
from codeblocks.engine.styles import CLASS_VARIATION, BlockStyle, StylePolicy

logger = logging.getLogger(__name__)


@dataclass
class BlockRect:
    """A rectangle handed to the SVG serializer."""

    x: int
    y: int
    width: int
    height: int
    class_name: str
    fill: str | None = None
    rx: float | None = None

    def to_attrs(self) -> dict[str, str]:
        attrs = {
            "width": str(self.width),
            "height": str(self.height),
            "x": str(self.x),
            "y": str(self.y),
        }
        if self.rx is not None:
            attrs["rx"] = f"{self.rx:g}"
        if self.fill is not None:
            attrs["style"] = f"fill: {self.fill}"
        attrs["class"] = self.class_name
        return attrs


@dataclass
class LayoutResult:
    width: int
    height: int
    rows: int
    columns: int
    rects: list[BlockRect] = field(default_factory=list)
    # Total run width not covered by any block
    gap_width: int = 0
    processing_time_ms: float = 0.0


class BlockLayout:
    """Turns a pixel sampler into code-like block rectangles."""

    def __init__(
        self,
        config: LayoutConfig | None = None,
        policy: StylePolicy | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config or LayoutConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.policy = policy or get_registry().create(CLASS_VARIATION, self.config, None, self.rng)

    def segment_row(self, columns: list[Column]) -> tuple[list[Column], int]:
        """Merge a sampled row and re-split each filled run. Returns (blocks, gap)."""
        blocks: list[Column] = []
        gap = 0
        for run in merge_row_columns(columns):
            run_blocks, run_gap = segment_column(run, self.config, self.rng)
            blocks.extend(run_blocks)
            gap += run_gap
        return blocks, gap

    def style_blocks(
        self, blocks: list[Column], previous: Hashable | None = None
    ) -> tuple[list[BlockRect], Hashable | None]:
        """Assign styles left to right, threading the lookback key."""
        pad = self.config.padding
        rects: list[BlockRect] = []
        for block in blocks:
            if not block.fill:
                continue
            style = self.policy.resolve(block.block_width, previous)
            previous = style.key
            rects.append(
                BlockRect(
                    x=block.start_x,
                    y=block.start_y,
                    width=block.block_width - pad,
                    height=self.config.block_height - pad,
                    class_name=style.class_name,
                    fill=style.fill,
                    rx=style.border_radius,
                )
            )
        return rects, previous

    def run(self, sampler: PixelSampler | None) -> LayoutResult:
        if sampler is None:
            raise SamplerUnavailableError("No pixel sampler supplied")

        start = time.perf_counter()
        rows_count, columns_count = grid_shape(sampler.width, sampler.height, self.config)
        result = LayoutResult(
            width=sampler.width,
            height=sampler.height,
            rows=rows_count,
            columns=columns_count,
        )
        logger.info(
            "Layout: %dx%d image → %d rows × %d columns",
            sampler.width, sampler.height, rows_count, columns_count,
        )

        previous: Hashable | None = None
        for row in range(rows_count):
            t0 = time.perf_counter()
            if self.config.lookback == LOOKBACK_ROW:
                previous = None
            cells = build_row(sampler, row * self.config.block_height, columns_count, self.config)
            blocks, gap = self.segment_row(cells)
            rects, previous = self.style_blocks(blocks, previous)
            result.rects.extend(rects)
            result.gap_width += gap
            logger.debug(
                "  row %d: %d blocks in %.1fms", row, len(rects), (time.perf_counter() - t0) * 1000
            )

        result.processing_time_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Layout complete: %d blocks in %.0fms", len(result.rects), result.processing_time_ms
        )
        return result


def create_layout(
    config: LayoutConfig | None = None,
    policy: str = CLASS_VARIATION,
    styles: Sequence[BlockStyle] | None = None,
) -> BlockLayout:
    """Factory: build a BlockLayout with a registered style policy."""
    config = config or LayoutConfig()
    rng = np.random.default_rng(config.seed)
    style = get_registry().create(policy, config, styles, rng)
    return BlockLayout(config=config, policy=style, rng=rng)
