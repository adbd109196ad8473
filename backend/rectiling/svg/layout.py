"""Canvas layout — one uniform scale plus a Y flip from tiling to device pixels."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from rectiling.engine.traversal import OutputRectangle

# Blank margin around the tiling, in device pixels
CANVAS_PADDING = 30


@dataclass(frozen=True)
class CanvasLayout:
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    padding: float
    scale: float

    def to_device(self, rect: OutputRectangle) -> tuple[float, float, float, float]:
        """Return (x, y, width, height) in pixels, y measured from the top."""
        x = self.padding + (rect.left - self.min_x) * self.scale
        y = self.padding + (self.max_y - rect.top) * self.scale
        return (
            x,
            y,
            (rect.right - rect.left) * self.scale,
            (rect.top - rect.bottom) * self.scale,
        )


def measure_bounds(rectangles: list[OutputRectangle]) -> tuple[float, float, float, float]:
    """Bounding box (min_x, max_x, min_y, max_y) of all rectangles."""
    if not rectangles:
        return (0.0, 0.0, 0.0, 0.0)
    edges = np.array([(r.left, r.right, r.bottom, r.top) for r in rectangles], dtype=np.float64)
    return (
        float(edges[:, 0].min()),
        float(edges[:, 1].max()),
        float(edges[:, 2].min()),
        float(edges[:, 3].max()),
    )


def compute_layout(rectangles: list[OutputRectangle], canvas_size: float) -> CanvasLayout:
    min_x, max_x, min_y, max_y = measure_bounds(rectangles)
    inner = max(1.0, canvas_size - CANVAS_PADDING * 2)
    width = (max_x - min_x) or 1.0
    height = (max_y - min_y) or 1.0
    scale = min(inner / width, inner / height)
    return CanvasLayout(min_x, max_x, min_y, max_y, CANVAS_PADDING, scale)
