"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    style_policies: list[str] = Field(default_factory=list)


class BlockModel(BaseModel):
    x: int
    y: int
    width: int
    height: int
    class_name: str
    fill: str | None = None
    rx: float | None = None


class BlocksResponse(BaseModel):
    svg: str
    blocks: list[BlockModel] = Field(default_factory=list)
    rows: int = 0
    columns: int = 0
    gap_width: int = 0
    processing_time_ms: float = 0.0
