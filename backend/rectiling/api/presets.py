"""GET /api/presets — the named seed sets."""

from __future__ import annotations

from fastapi import APIRouter

from rectiling.engine.presets import get_preset, preset_names
from rectiling.models.requests import SeedModel
from rectiling.models.responses import PresetResponse

router = APIRouter()


@router.get("/presets", response_model=list[PresetResponse])
async def presets() -> list[PresetResponse]:
    return [
        PresetResponse(
            name=name,
            seeds=[SeedModel(x=s.x, y=s.y, width=s.width, height=s.height) for s in get_preset(name)],
        )
        for name in preset_names()
    ]
