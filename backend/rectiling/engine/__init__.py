"""Rectiling tiling engine."""

from rectiling.engine.colors import RGB, color_for
from rectiling.engine.config import ConflictPolicy, TilingConfig, suggest_grid_width
from rectiling.engine.grid import Bounds, Cell, Conflict, SeedRect, TileGrid, create_grid, seed
from rectiling.engine.pipeline import TilingResult, generate_tiling
from rectiling.engine.propagation import propagate
from rectiling.engine.traversal import OutputRectangle, traverse

__all__ = [
    "RGB",
    "color_for",
    "ConflictPolicy",
    "TilingConfig",
    "suggest_grid_width",
    "Bounds",
    "Cell",
    "Conflict",
    "SeedRect",
    "TileGrid",
    "create_grid",
    "seed",
    "TilingResult",
    "generate_tiling",
    "propagate",
    "OutputRectangle",
    "traverse",
]
