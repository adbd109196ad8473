"""Tests for the canvas layout transform."""

import pytest

from rectiling.engine.traversal import OutputRectangle
from rectiling.svg.layout import CANVAS_PADDING, compute_layout, measure_bounds


def _rect(left, bottom, right, top):
    return OutputRectangle(
        left=left, right=right, top=top, bottom=bottom,
        width=right - left, height=top - bottom,
    )


def test_single_rectangle_fills_inner_canvas():
    rect = _rect(0, 0, 13, 13)
    layout = compute_layout([rect], 800)
    assert layout.scale == pytest.approx(740 / 13)
    x, y, w, h = layout.to_device(rect)
    assert (x, y) == pytest.approx((CANVAS_PADDING, CANVAS_PADDING))
    assert (w, h) == pytest.approx((740, 740))


def test_y_axis_is_flipped():
    lower = _rect(0, 0, 10, 10)
    upper = _rect(0, 10, 10, 20)
    layout = compute_layout([lower, upper], 260)
    # inner 200, extents 10 × 20 -> scale limited by height
    assert layout.scale == pytest.approx(10)
    assert layout.to_device(upper)[1] == pytest.approx(30)
    assert layout.to_device(lower)[1] == pytest.approx(130)


def test_measure_bounds():
    rects = [_rect(-4, -2, 0, 3), _rect(0, 0, 9, 14)]
    assert measure_bounds(rects) == (-4, 9, -2, 14)
    assert measure_bounds([]) == (0.0, 0.0, 0.0, 0.0)


def test_tiny_canvas_keeps_positive_scale():
    layout = compute_layout([_rect(0, 0, 10, 10)], 20)
    assert layout.scale == pytest.approx(0.1)
