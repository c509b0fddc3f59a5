"""Tests for SVG document assembly."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from codeblocks.engine.layout import BlockRect
from codeblocks.svg.serializer import SVG_NS, group_id, serialize_blocks_svg


def _rects():
    return [
        BlockRect(x=0, y=0, width=18, height=16, class_name="block-width-2 block-variation-1"),
        BlockRect(x=20, y=0, width=8, height=16, class_name="block-width-1 block-index-1", fill="#e06c75", rx=3),
    ]


def test_document_structure():
    svg = serialize_blocks_svg(_rects(), 100, 20, svg_id="hero")
    root = ET.fromstring(svg)
    assert root.tag == f"{{{SVG_NS}}}svg"
    assert root.get("viewBox") == "0 0 100 20"
    group = root.find(f"{{{SVG_NS}}}g")
    assert group is not None
    assert group.get("id") == "hero-code-blocks-group"
    rects = group.findall(f"{{{SVG_NS}}}rect")
    assert len(rects) == 2
    assert rects[1].get("rx") == "3"
    assert rects[1].get("style") == "fill: #e06c75"
    assert rects[0].get("class") == "block-width-2 block-variation-1"


def test_empty_layout_still_has_group():
    root = ET.fromstring(serialize_blocks_svg([], 10, 10))
    group = root.find(f"{{{SVG_NS}}}g")
    assert group is not None
    assert len(group) == 0


def test_attribute_values_escaped():
    rect = BlockRect(x=0, y=0, width=1, height=1, class_name='a"b<c>&', fill="url(#x)")
    root = ET.fromstring(serialize_blocks_svg([rect], 1, 1, svg_id='x"y'))
    group = root.find(f"{{{SVG_NS}}}g")
    assert group.get("id") == 'x"y-code-blocks-group'
    assert group.find(f"{{{SVG_NS}}}rect").get("class") == 'a"b<c>&'



def test_group_id():
    assert group_id("demo") == "demo-code-blocks-group"
