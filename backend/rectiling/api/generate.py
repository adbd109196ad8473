"""POST /api/generate* — run a tiling generation and return JSON, SVG or PNG."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from rectiling.config import Settings
from rectiling.dependencies import get_settings
from rectiling.engine.config import TilingConfig
from rectiling.engine.grid import SeedRect
from rectiling.engine.pipeline import TilingResult, generate_tiling
from rectiling.engine.presets import get_preset
from rectiling.models.requests import GenerateRequest
from rectiling.models.responses import (
    ConflictModel,
    ErrorResponse,
    GenerateResponse,
    RectangleModel,
    ValidationModel,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/generate")

# Shape written by main.tiling_error_handler
_ERRORS = {422: {"model": ErrorResponse}}


def _pick(value, default):
    return default if value is None else value


def build_config(req: GenerateRequest, cfg: Settings) -> TilingConfig:
    return TilingConfig(
        cx=_pick(req.cx, cfg.default_cx),
        grid_width=_pick(req.grid_width, cfg.default_grid_width),
        max_side=_pick(req.max_side, cfg.default_max_side),
        edge_width=_pick(req.edge_width, cfg.default_edge_width),
        colorize=req.colorize,
        label=req.label,
        canvas_size=_pick(req.canvas_size, cfg.default_canvas_size),
        max_iterations=_pick(req.max_iterations, cfg.default_max_iterations),
        conflict_policy=req.conflict_policy,
    )


def resolve_seeds(req: GenerateRequest, cfg: Settings) -> list[SeedRect]:
    if req.seeds is not None:
        return [SeedRect(s.x, s.y, s.width, s.height) for s in req.seeds]
    return get_preset(req.preset or cfg.default_preset)


def _run(req: GenerateRequest, cfg: Settings) -> tuple[TilingConfig, TilingResult]:
    config = build_config(req, cfg)
    result = generate_tiling(config, resolve_seeds(req, cfg))
    if not result.converged:
        logger.warning("Returning partial tiling after %d rounds", result.iterations)
    return config, result


@router.post("", response_model=GenerateResponse, responses=_ERRORS)
async def generate(
    req: GenerateRequest,
    cfg: Settings = Depends(get_settings),
) -> GenerateResponse:
    _, result = _run(req, cfg)

    validation = None
    if req.check:
        from rectiling.engine.validation import validate_tiling

        validation = ValidationModel(**validate_tiling(result.rectangles))

    return GenerateResponse(
        rectangles=[RectangleModel(**r.to_dict()) for r in result.rectangles],
        iterations=result.iterations,
        converged=result.converged,
        conflicts=[ConflictModel(**c.to_dict()) for c in result.conflicts],
        message=result.message,
        processing_time_ms=result.elapsed_ms,
        validation=validation,
    )


@router.post("/svg", responses=_ERRORS)
async def generate_svg(
    req: GenerateRequest,
    cfg: Settings = Depends(get_settings),
) -> Response:
    from rectiling.svg.serializer import render_svg

    config, result = _run(req, cfg)
    return Response(
        content=render_svg(result.rectangles, config),
        media_type="image/svg+xml",
        headers={"Content-Disposition": 'attachment; filename="tiling.svg"'},
    )


@router.post("/png", responses=_ERRORS)
async def generate_png(
    req: GenerateRequest,
    cfg: Settings = Depends(get_settings),
) -> Response:
    from rectiling.svg.png import render_png

    config, result = _run(req, cfg)
    return Response(
        content=render_png(result.rectangles, config),
        media_type="image/png",
        headers={"Content-Disposition": 'attachment; filename="tiling.png"'},
    )
