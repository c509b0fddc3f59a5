"""POST /api/blocks — image to code-block skeleton SVG."""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
from typing import TypeVar

from fastapi import APIRouter, Depends, HTTPException

from codeblocks.config import Settings
from codeblocks.dependencies import get_settings
from codeblocks.engine.config import LayoutConfig
from codeblocks.engine.layout import create_layout
from codeblocks.engine.sampler import ImageSampler, SamplerUnavailableError, load_image, rasterize_svg
from codeblocks.engine.styles import BlockStyle, StylePoolEmptyError
from codeblocks.models.requests import BlocksRequest
from codeblocks.models.responses import BlockModel, BlocksResponse
from codeblocks.svg.serializer import serialize_blocks_svg

logger = logging.getLogger(__name__)

router = APIRouter()

T = TypeVar("T")


def _pick(value: T | None, default: T) -> T:
    return default if value is None else value


def _layout_config(req: BlocksRequest, settings: Settings) -> LayoutConfig:
    return LayoutConfig(
        block_height=_pick(req.block_height, settings.block_height),
        code_block_min_width=_pick(req.code_block_min_width, settings.code_block_min_width),
        code_block_max_width=_pick(req.code_block_max_width, settings.code_block_max_width),
        padding=_pick(req.padding, settings.padding),
        style_variations_count=_pick(req.style_variations_count, settings.style_variations_count),
        lookback=_pick(req.lookback, settings.lookback),
        seed=req.seed,
    )


def _sampler(req: BlocksRequest, settings: Settings) -> ImageSampler:
    if req.image:
        try:
            data = base64.b64decode(req.image, validate=True)
        except (binascii.Error, ValueError) as e:
            raise SamplerUnavailableError(f"Invalid base64 image: {e}") from e
        return ImageSampler(load_image(data, settings.max_raster_size))
    if req.svg:
        return ImageSampler(rasterize_svg(req.svg, req.width, req.height, settings.max_raster_size))
    raise SamplerUnavailableError("Request needs either 'image' or 'svg'")


def _render_blocks(req: BlocksRequest, settings: Settings) -> BlocksResponse:
    """Decode, lay out and serialize; synchronous and CPU-bound."""
    config = _layout_config(req, settings)
    styles = [BlockStyle(width=s.width, color=s.color, border_radius=s.border_radius) for s in req.styles]
    layout = create_layout(config, policy=req.policy, styles=styles)
    result = layout.run(_sampler(req, settings))

    svg = serialize_blocks_svg(result.rects, result.width, result.height, svg_id=req.id)

    return BlocksResponse(
        svg=svg,
        blocks=[
            BlockModel(
                x=r.x, y=r.y, width=r.width, height=r.height,
                class_name=r.class_name, fill=r.fill, rx=r.rx,
            )
            for r in result.rects
        ],
        rows=result.rows,
        columns=result.columns,
        gap_width=result.gap_width,
        processing_time_ms=round(result.processing_time_ms, 1),
    )


@router.post("/blocks", response_model=BlocksResponse)
async def blocks(req: BlocksRequest, settings: Settings = Depends(get_settings)) -> BlocksResponse:
    # Run in a thread so the event loop stays free for other requests
    loop = asyncio.get_running_loop()
    try:
        return await loop.run_in_executor(None, _render_blocks, req, settings)
    except StylePoolEmptyError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except (SamplerUnavailableError, ValueError) as e:
        logger.info("Rejected blocks request: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e
