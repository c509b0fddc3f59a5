"""Random segmenter — re-split merged runs into varied code-like block widths.

Widths are drawn in "units" of code_block_min_width. Each draw is made
uniformly from the set of widths that are
  - within [min, max] and no wider than what is left of the run,
  - different from the previously accepted width,
  - able to lead to a complete tiling of what remains without a repeat.
The last condition has a closed form (see ``_completable``), so a draw can
never paint the run into a corner and no rejection loop is needed.

When [min, max] admits only one width the pool is a singleton and repeats
are accepted; the run is tiled with min-width blocks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from codeblocks.engine.config import LayoutConfig
from codeblocks.engine.grid import Column

logger = logging.getLogger(__name__)


@dataclass
class Segmentation:
    """Accepted widths for one run plus the uncovered remainder."""

    widths: list[int] = field(default_factory=list)
    gap: int = 0

    @property
    def covered(self) -> int:
        return sum(self.widths)


def _completable(remaining: int, previous: int, max_units: int) -> bool:
    """Can ``remaining`` units be tiled without repeating ``previous`` first?

    With three or more widths the only dead ends are 1 unit after a 1 and
    2 units after a 2. With exactly two widths the tiling must alternate
    1, 2, 1, ... so reachability depends on ``remaining`` mod 3.
    """
    if remaining == 0:
        return True
    if max_units >= 3:
        return not (remaining == previous and remaining in (1, 2))
    # Alternating sums: starting at 2 reach 0/2 mod 3, starting at 1 reach 0/1 mod 3
    if previous == 1:
        return remaining % 3 in (0, 2)
    return remaining % 3 in (0, 1)


def _candidates(remaining: int, previous: int | None, max_units: int) -> list[int]:
    return [
        c for c in range(1, min(max_units, remaining) + 1)
        if c != previous and _completable(remaining - c, c, max_units)
    ]


def segment_width(
    width: int,
    min_width: int,
    max_width: int,
    rng: np.random.Generator,
) -> Segmentation:
    """Split ``width`` into random multiples of ``min_width`` bounded by ``max_width``.

    ``sum(result.widths) + result.gap == width`` and ``result.gap < min_width``.
    """
    total_units, tail = divmod(width, min_width)
    max_units = max_width // min_width

    if max_units == 1:
        return Segmentation(widths=[min_width] * total_units, gap=tail)

    units: list[int] = []
    remaining = total_units
    previous: int | None = None
    while remaining > 0:
        choice = int(rng.choice(_candidates(remaining, previous, max_units)))
        units.append(choice)
        remaining -= choice
        previous = choice

    return Segmentation(widths=[u * min_width for u in units], gap=tail)


def segment_column(
    column: Column,
    config: LayoutConfig,
    rng: np.random.Generator,
) -> tuple[list[Column], int]:
    """Replace a merged run with freshly segmented filled Columns.

    Unfilled Columns produce no blocks and no gap.
    """
    if not column.fill:
        return [], 0

    seg = segment_width(
        column.block_width,
        config.code_block_min_width,
        config.code_block_max_width,
        rng,
    )
    if seg.gap:
        logger.debug(
            "Run at (%d, %d) width %d leaves %dpx uncovered",
            column.start_x, column.start_y, column.block_width, seg.gap,
        )

    blocks: list[Column] = []
    start_x = column.start_x
    for w in seg.widths:
        blocks.append(Column(start_x=start_x, start_y=column.start_y, fill=True, block_width=w))
        start_x += w
    return blocks, seg.gap
