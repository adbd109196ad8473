"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from rectiling import __version__
from rectiling.engine.presets import preset_names
from rectiling.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        presets_available=len(preset_names()),
    )
