"""Generation pipeline — validate, seed, propagate, traverse."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable

from rectiling.engine.config import TilingConfig
from rectiling.engine.grid import Conflict, SeedRect, create_grid, seed, validate_seeds
from rectiling.engine.propagation import propagate
from rectiling.engine.traversal import OutputRectangle, traverse

logger = logging.getLogger(__name__)

# Side length, in characters, of the DEBUG text preview
PREVIEW_RESOLUTION = 24


@dataclass
class TilingResult:
    rectangles: list[OutputRectangle] = field(default_factory=list)
    iterations: int = 0
    converged: bool = True
    conflicts: list[Conflict] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @property
    def message(self) -> str:
        return f"Generated {len(self.rectangles)} rectangles in {self.iterations} iterations."


def text_preview(rectangles: list[OutputRectangle], resolution: int = PREVIEW_RESOLUTION) -> str:
    """One character per rectangle index, top row first."""
    from rectiling.utils.rasterizer import grid_to_text, rasterize_tiling

    return grid_to_text(rasterize_tiling(rectangles, resolution=resolution))


def generate_tiling(config: TilingConfig, seeds: Iterable[SeedRect]) -> TilingResult:
    """Run one generation on a fresh grid.

    Raises a ``TilingError`` subclass on invalid input, when the centre stays
    undimensioned, or when nothing is drawable.
    """
    start = time.perf_counter()
    config.validate()
    seeds = validate_seeds(seeds)

    grid = create_grid(config)
    seed(grid, config, seeds)
    report = propagate(grid, config)
    rectangles = traverse(grid, config)

    result = TilingResult(
        rectangles=rectangles,
        iterations=report.iterations,
        converged=report.converged,
        conflicts=report.conflicts,
        elapsed_ms=round((time.perf_counter() - start) * 1000, 1),
    )
    logger.info("%s (%.0fms)", result.message, result.elapsed_ms)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Tiling preview:\n%s", text_preview(rectangles))
    return result
