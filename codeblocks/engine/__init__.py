"""Code-block layout engine."""

from codeblocks.engine.config import LayoutConfig, LayoutConfigError
from codeblocks.engine.grid import Column
from codeblocks.engine.layout import BlockLayout, BlockRect, LayoutResult, create_layout
from codeblocks.engine.registry import get_registry, style_policy
from codeblocks.engine.sampler import ImageSampler, SamplerUnavailableError
from codeblocks.engine.styles import BlockStyle, StylePoolEmptyError

__all__ = [
    "LayoutConfig",
    "LayoutConfigError",
    "Column",
    "BlockLayout",
    "BlockRect",
    "LayoutResult",
    "create_layout",
    "get_registry",
    "style_policy",
    "ImageSampler",
    "SamplerUnavailableError",
    "BlockStyle",
    "StylePoolEmptyError",
]
