"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from codeblocks import __version__
from codeblocks.engine.registry import get_registry
from codeblocks.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        style_policies=[spec.name for spec in get_registry().all()],
    )


@router.get("/policies")
async def policies() -> dict[str, str]:
    return {spec.name: spec.description for spec in get_registry().all()}
