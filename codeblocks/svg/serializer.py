"""Write the code-blocks SVG document from rectangle descriptors."""

from __future__ import annotations

from typing import Iterable
from xml.sax.saxutils import quoteattr

from codeblocks.engine.layout import BlockRect

SVG_NS = "http://www.w3.org/2000/svg"


def group_id(svg_id: str) -> str:
    return f"{svg_id}-code-blocks-group"


def serialize_blocks_svg(
    rects: Iterable[BlockRect],
    width: int,
    height: int,
    svg_id: str = "code-blocks",
) -> str:
    """Generate SVG markup: one <g> holding one <rect> per block."""
    lines = [
        f'<svg xmlns="{SVG_NS}" xmlns:svg="{SVG_NS}" viewBox="0 0 {width} {height}">',
    ]

    lines.append(f"  <g id={quoteattr(group_id(svg_id))}>")
    for rect in rects:
        attr_str = " ".join(f"{k}={quoteattr(v)}" for k, v in rect.to_attrs().items())
        lines.append(f"    <rect {attr_str} />")
    lines.append("  </g>")

    lines.append("</svg>")
    return "\n".join(lines)
