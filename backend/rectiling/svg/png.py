"""Bitmap export — rasterise the tiling's SVG with cairosvg."""

from __future__ import annotations

from rectiling.engine.config import TilingConfig
from rectiling.engine.traversal import OutputRectangle
from rectiling.svg.serializer import render_svg


def render_png(rectangles: list[OutputRectangle], config: TilingConfig) -> bytes:
    """Render SVG → PNG bytes, ``canvas_size`` pixels square."""
    import cairosvg

    svg = render_svg(rectangles, config)
    return cairosvg.svg2png(
        bytestring=svg.encode(),
        output_width=config.canvas_size,
        output_height=config.canvas_size,
    )
