"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from rectiling.engine.config import ConflictPolicy


class SeedModel(BaseModel):
    x: int = Field(..., description="Column offset from the grid centre")
    y: int = Field(..., description="Row offset from the grid centre")
    width: float = Field(..., description="Seed rectangle width (positive)")
    height: float = Field(..., description="Seed rectangle height (positive)")


class GenerateRequest(BaseModel):
    preset: str | None = Field(default=None, description="Named seed set (ignored when seeds are given)")
    seeds: list[SeedModel] | None = Field(default=None, description="Explicit seed rectangles")
    cx: int | None = Field(default=None, description="Grid centre; multiple of 4")
    grid_width: int | None = Field(default=None, description="Even propagation window, smaller than cx")
    max_side: float | None = Field(default=None, description="Colour scale reference")
    edge_width: float | None = Field(default=None, description="Stroke width for exports")
    max_iterations: int | None = Field(default=None, description="Propagation round budget")
    canvas_size: int | None = Field(default=None, description="Export canvas side in pixels")
    colorize: bool = Field(default=True, description="Fill rectangles by dimension")
    label: bool = Field(default=False, description="Write 'w,h' labels in exports")
    conflict_policy: ConflictPolicy = Field(
        default=ConflictPolicy.FIRST_WRITER,
        description="first_writer keeps the first derived value; strict rejects inconsistent seeds",
    )
    check: bool = Field(default=False, description="Also report overlap/area validation")
