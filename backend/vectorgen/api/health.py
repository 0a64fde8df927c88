"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from vectorgen import __version__
from vectorgen.models.responses import HealthResponse
from vectorgen.parser import get_registry

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        dialects=[spec.icon_type.value for spec in get_registry().all()],
    )
