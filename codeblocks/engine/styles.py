"""Style assigner — pick a style per block without repeating the previous one.

Policies are stateless with respect to lookback: the caller threads the
previous ``key`` through each ``resolve`` call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Protocol, Sequence

import numpy as np

from codeblocks.engine.config import LayoutConfig, LayoutConfigError
from codeblocks.engine.registry import style_policy

CLASS_VARIATION = "class-variation"
STYLE_TABLE = "style-table"


class StylePoolEmptyError(LookupError):
    """Raised when no style is defined for a block width."""


@dataclass(frozen=True)
class BlockStyle:
    """An externally defined style for blocks of exactly ``width`` pixels."""

    width: int
    color: str
    border_radius: float = 0.0


@dataclass(frozen=True)
class ResolvedStyle:
    class_name: str
    key: Hashable
    fill: str | None = None
    border_radius: float | None = None


class StylePolicy(Protocol):
    def resolve(self, width: int, previous: Hashable | None) -> ResolvedStyle: ...


def _draw_index(pool: Sequence[Any], previous: Any, rng: np.random.Generator) -> int:
    """Uniform index into ``pool`` avoiding an entry equal to ``previous``.

    A pool with a single distinct choice always yields immediately.
    """
    indices = list(range(len(pool)))
    if len(pool) > 1:
        fresh = [i for i in indices if pool[i] != previous]
        if fresh:
            indices = fresh
    return int(rng.choice(indices))


class ClassVariationPolicy:
    """Class ``block-width-{units} block-variation-{n}``, n in [1, variations_count]."""

    def __init__(self, min_width: int, variations_count: int, rng: np.random.Generator) -> None:
        if variations_count < 1:
            raise LayoutConfigError(f"variations_count must be at least 1, got {variations_count}")
        self.min_width = min_width
        self.variations_count = variations_count
        self._rng = rng

    def resolve(self, width: int, previous: Hashable | None) -> ResolvedStyle:
        units = width // self.min_width
        pool = [
            f"block-width-{units} block-variation-{v}"
            for v in range(1, self.variations_count + 1)
        ]
        name = pool[_draw_index(pool, previous, self._rng)]
        return ResolvedStyle(class_name=name, key=name)


class StyleTablePolicy:
    """Styles looked up by exact block width from an external table."""

    def __init__(self, styles: Sequence[BlockStyle], rng: np.random.Generator) -> None:
        if not styles:
            raise LayoutConfigError("style-table policy needs at least one style")
        self._by_width: dict[int, list[BlockStyle]] = {}
        for style in styles:
            self._by_width.setdefault(style.width, []).append(style)
        self._rng = rng

    @property
    def widths(self) -> list[int]:
        return sorted(self._by_width)

    def resolve(self, width: int, previous: Hashable | None) -> ResolvedStyle:
        pool = self._by_width.get(width)
        if not pool:
            raise StylePoolEmptyError(
                f"No block style defined for width {width} (defined: {self.widths})"
            )
        idx = _draw_index(pool, previous, self._rng)
        style = pool[idx]
        return ResolvedStyle(
            class_name=f"block-width-{style.width} block-index-{idx + 1}",
            key=style,
            fill=style.color,
            border_radius=style.border_radius,
        )


@style_policy(CLASS_VARIATION, description="CSS class per width and random variation")
def _class_variation(
    config: LayoutConfig,
    styles: Sequence[BlockStyle] | None,
    rng: np.random.Generator,
) -> StylePolicy:
    return ClassVariationPolicy(config.code_block_min_width, config.style_variations_count, rng)


@style_policy(STYLE_TABLE, description="Colour and corner radius from a per-width style table")
def _style_table(
    config: LayoutConfig,
    styles: Sequence[BlockStyle] | None,
    rng: np.random.Generator,
) -> StylePolicy:
    return StyleTablePolicy(styles or [], rng)
