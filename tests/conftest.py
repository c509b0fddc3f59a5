"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from codeblocks.engine.config import LayoutConfig
from codeblocks.engine.sampler import ImageSampler


def white_image(width: int, height: int) -> np.ndarray:
    return np.full((height, width, 4), 255, dtype=np.uint8)


def striped_image(width: int, height: int, x0: int, x1: int, color=(0, 0, 0, 255)) -> np.ndarray:
    """White image with columns [x0, x1) painted ``color`` on every row."""
    img = white_image(width, height)
    img[:, x0:x1] = color
    return img


# A small SVG with two dark bars on white
BARS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="40" viewBox="0 0 100 40">
  <rect width="100" height="40" fill="#ffffff"/>
  <rect x="0" y="0" width="60" height="20" fill="#333333"/>
  <rect x="20" y="20" width="80" height="20" fill="#333333"/>
</svg>'''


@pytest.fixture
def config() -> LayoutConfig:
    return LayoutConfig(block_height=20, code_block_min_width=10, code_block_max_width=40, padding=2, seed=7)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def stripe_sampler() -> ImageSampler:
    """100×20 image, coloured at x ∈ [20, 50)."""
    return ImageSampler(striped_image(100, 20, 20, 50))
