"""Tests for the row-by-row layout orchestrator."""

from __future__ import annotations

import pytest

from codeblocks.engine.config import LayoutConfig
from codeblocks.engine.layout import BlockLayout, BlockRect, create_layout
from codeblocks.engine.sampler import ImageSampler, SamplerUnavailableError
from codeblocks.engine.styles import BlockStyle, ResolvedStyle, StylePoolEmptyError
from tests.conftest import striped_image, white_image


class RecordingPolicy:
    """Returns a fixed style and records the lookback value it was given."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, object]] = []
        self._n = 0

    def resolve(self, width, previous):
        self.calls.append((width, previous))
        self._n += 1
        return ResolvedStyle(class_name=f"c{self._n}", key=self._n)


class FakeSampler:
    """Duck-typed sampler: every cell in the left half is occupied."""

    width = 80
    height = 40

    def occupied(self, x, y, width, height):
        return x < 40


def test_example_stripe(stripe_sampler, config):
    result = BlockLayout(config).run(stripe_sampler)
    assert (result.rows, result.columns) == (1, 10)
    assert result.gap_width == 0
    assert result.rects
    assert sum(r.width + config.padding for r in result.rects) == 30
    assert result.rects[0].x == 20
    for rect in result.rects:
        assert 20 <= rect.x < 50
        assert rect.y == 0
        assert rect.height == config.block_height - config.padding
    assert result.processing_time_ms >= 0


def test_white_image_has_no_blocks(config):
    result = BlockLayout(config).run(ImageSampler(white_image(100, 60)))
    assert result.rects == []
    assert result.rows == 3


def test_missing_sampler_is_fatal(config):
    with pytest.raises(SamplerUnavailableError):
        BlockLayout(config).run(None)


def test_duck_typed_sampler(config):
    result = BlockLayout(config).run(FakeSampler())
    assert result.rows == 2
    for y in (0, 20):
        row = [r for r in result.rects if r.y == y]
        assert sum(r.width + config.padding for r in row) == 40


def test_consecutive_classes_differ_across_image():
    config = LayoutConfig(block_height=10, code_block_min_width=10, code_block_max_width=30,
                          padding=1, style_variations_count=2, lookback="image", seed=3)
    result = BlockLayout(config).run(ImageSampler(striped_image(200, 100, 0, 200)))
    for a, b in zip(result.rects, result.rects[1:]):
        assert a.class_name != b.class_name


def test_row_lookback_resets_each_row():
    config = LayoutConfig(block_height=20, code_block_min_width=10, code_block_max_width=10,
                          padding=0, lookback="row")
    policy = RecordingPolicy()
    BlockLayout(config, policy=policy).run(FakeSampler())
    # 4 blocks per row; first call of each row starts fresh
    assert len(policy.calls) == 8
    assert policy.calls[0][1] is None
    assert policy.calls[4][1] is None
    assert policy.calls[5][1] == 5


def test_image_lookback_carries_across_rows():
    config = LayoutConfig(block_height=20, code_block_min_width=10, code_block_max_width=10,
                          padding=0, lookback="image")
    policy = RecordingPolicy()
    BlockLayout(config, policy=policy).run(FakeSampler())
    assert policy.calls[0][1] is None
    assert policy.calls[4][1] == 4


def test_seed_reproducible():
    config = LayoutConfig(seed=99)
    img = ImageSampler(striped_image(300, 60, 0, 300))
    a = create_layout(config).run(img)
    b = create_layout(config).run(img)
    assert a.rects == b.rects


def test_style_table_layout():
    config = LayoutConfig(block_height=20, code_block_min_width=10, code_block_max_width=30, padding=2, seed=1)
    styles = [
        BlockStyle(width=10, color="#a00", border_radius=1),
        BlockStyle(width=20, color="#0a0", border_radius=2),
        BlockStyle(width=20, color="#0b0", border_radius=2),
        BlockStyle(width=30, color="#00a", border_radius=3),
    ]
    result = create_layout(config, policy="style-table", styles=styles).run(
        ImageSampler(striped_image(100, 20, 0, 100))
    )
    assert result.rects
    for rect in result.rects:
        assert rect.fill is not None
        assert rect.rx is not None


def test_style_table_missing_width_surfaces():
    config = LayoutConfig(block_height=20, code_block_min_width=10, code_block_max_width=30, padding=0, seed=1)
    styles = [BlockStyle(width=10, color="#a00")]
    layout = create_layout(config, policy="style-table", styles=styles)
    with pytest.raises(StylePoolEmptyError):
        layout.run(ImageSampler(striped_image(100, 20, 0, 100)))


def test_rect_attrs():
    rect = BlockRect(x=10, y=20, width=18, height=16, class_name="a b", fill="#fff", rx=2.5)
    attrs = rect.to_attrs()
    assert attrs == {
        "width": "18",
        "height": "16",
        "x": "10",
        "y": "20",
        "rx": "2.5",
        "style": "fill: #fff",
        "class": "a b",
    }
    assert "rx" not in BlockRect(0, 0, 1, 1, "c").to_attrs()
