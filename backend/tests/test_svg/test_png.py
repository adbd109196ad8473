"""Tests for PNG export (needs the cairo system library)."""

from __future__ import annotations

import io

import pytest

from rectiling.engine.config import TilingConfig
from rectiling.engine.pipeline import generate_tiling


@pytest.fixture
def cairosvg():
    try:
        import cairosvg as module
    except (ImportError, OSError) as e:
        pytest.skip(f"cairosvg unavailable: {e}")
    return module


def test_png_matches_canvas_size(cairosvg, uniform_seeds):
    from PIL import Image

    from rectiling.svg.png import render_png

    config = TilingConfig(cx=32, grid_width=8, canvas_size=200)
    result = generate_tiling(config, uniform_seeds)
    png = render_png(result.rectangles, config)

    assert png.startswith(b"\x89PNG")
    img = Image.open(io.BytesIO(png))
    assert img.size == (200, 200)
