"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from rectiling.models.requests import SeedModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    presets_available: int = 0


class PresetResponse(BaseModel):
    name: str
    seeds: list[SeedModel] = Field(default_factory=list)


class RectangleModel(BaseModel):
    left: float
    right: float
    top: float
    bottom: float
    width: float
    height: float
    fill: str


class ConflictModel(BaseModel):
    rule: str
    dimension: str
    x: int
    y: int
    existing: float
    derived: float


class ValidationModel(BaseModel):
    valid: bool
    rectangle_count: int
    total_area: float
    union_area: float
    issues: list[str] = Field(default_factory=list)


class GenerateResponse(BaseModel):
    rectangles: list[RectangleModel] = Field(default_factory=list)
    iterations: int = 0
    converged: bool = True
    conflicts: list[ConflictModel] = Field(default_factory=list)
    message: str = ""
    processing_time_ms: float = 0.0
    validation: ValidationModel | None = None


class ErrorResponse(BaseModel):
    error: str
    detail: str
