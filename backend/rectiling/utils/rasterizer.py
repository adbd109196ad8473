"""Rasterization utilities — tiling to label grid, grid to text.

Used for quick text previews of a tiling (logs, terminals, tests).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from rectiling.engine.traversal import OutputRectangle
from rectiling.svg.layout import measure_bounds

# Pixel value for "no rectangle here"
EMPTY = -1

_LABEL_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


def _pixel_centers(
    rectangles: list[OutputRectangle],
    resolution: int,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    min_x, max_x, min_y, max_y = measure_bounds(rectangles)
    step_x = ((max_x - min_x) or 1.0) / resolution
    step_y = ((max_y - min_y) or 1.0) / resolution
    offsets = np.arange(resolution, dtype=np.float64) + 0.5
    xs = min_x + offsets * step_x
    # Row 0 is the top of the tiling
    ys = max_y - offsets * step_y
    return np.meshgrid(xs, ys)


def rasterize_tiling(
    rectangles: list[OutputRectangle],
    resolution: int = 32,
) -> NDArray[np.int32]:
    """Sample the tiling's bounding box on a resolution×resolution grid.

    Each pixel holds the index of the rectangle covering its centre, or
    ``EMPTY``. Later rectangles win where rectangles overlap.
    """
    grid = np.full((resolution, resolution), EMPTY, dtype=np.int32)
    if not rectangles:
        return grid

    px, py = _pixel_centers(rectangles, resolution)
    for idx, rect in enumerate(rectangles):
        mask = (px >= rect.left) & (px < rect.right) & (py >= rect.bottom) & (py < rect.top)
        grid[mask] = idx
    return grid


def coverage_counts(
    rectangles: list[OutputRectangle],
    resolution: int = 32,
) -> NDArray[np.int32]:
    """How many rectangles cover each pixel centre. Values above 1 are overlaps."""
    counts = np.zeros((resolution, resolution), dtype=np.int32)
    if not rectangles:
        return counts

    px, py = _pixel_centers(rectangles, resolution)
    for rect in rectangles:
        counts += (px >= rect.left) & (px < rect.right) & (py >= rect.bottom) & (py < rect.top)
    return counts


def grid_to_text(grid: NDArray[np.int32], empty: str = ".") -> str:
    """Convert a label grid to text, one character per rectangle index."""
    rows = []
    for row in grid:
        rows.append(
            " ".join(empty if v == EMPTY else _LABEL_CHARS[v % len(_LABEL_CHARS)] for v in row)
        )
    return "\n".join(rows)


def grid_fill_percentage(grid: NDArray[np.int32]) -> float:
    """Percentage of pixels covered by some rectangle."""
    total = grid.size
    if total == 0:
        return 0.0
    return float(np.sum(grid != EMPTY) / total * 100)
