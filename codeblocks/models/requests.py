"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class BlockStyleModel(BaseModel):
    width: int = Field(..., description="Block width (px) this style applies to")
    color: str = Field(..., description="Fill colour")
    border_radius: float = Field(default=0.0, description="Corner radius (rendered as rx)")


class BlocksRequest(BaseModel):
    image: str | None = Field(default=None, description="Base64-encoded raster image")
    svg: str | None = Field(default=None, description="SVG markup, rasterized before sampling")
    width: int | None = Field(default=None, description="Raster width for SVG input")
    height: int | None = Field(default=None, description="Raster height for SVG input")

    block_height: int | None = None
    code_block_min_width: int | None = None
    code_block_max_width: int | None = None
    padding: int | None = None
    style_variations_count: int | None = None
    lookback: str | None = Field(default=None, description='"row" or "image"')
    seed: int | None = Field(default=None, description="Seed for reproducible layouts")

    policy: str = Field(default="class-variation", description="Style policy name")
    styles: list[BlockStyleModel] = Field(
        default_factory=list,
        description="Style table for the style-table policy",
    )
    id: str = Field(default="code-blocks", description="Prefix for the SVG group id")
