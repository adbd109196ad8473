"""Tests for tiling validation."""

from rectiling.engine.traversal import OutputRectangle
from rectiling.engine.validation import degenerate, find_overlaps, union_area, validate_tiling


def _rect(left, bottom, right, top):
    return OutputRectangle(
        left=left, right=right, top=top, bottom=bottom,
        width=right - left, height=top - bottom,
    )


def test_shared_edges_do_not_overlap():
    rects = [_rect(0, 0, 2, 2), _rect(2, 0, 4, 2), _rect(0, 2, 4, 3)]
    assert find_overlaps(rects) == []
    assert union_area(rects) == 12


def test_overlap_is_reported():
    rects = [_rect(0, 0, 2, 2), _rect(1, 1, 3, 3), _rect(5, 5, 6, 6)]
    assert find_overlaps(rects) == [(0, 1)]
    report = validate_tiling(rects)
    assert not report["valid"]
    assert report["union_area"] < report["total_area"]


def test_degenerate_rectangles():
    rects = [_rect(0, 0, 2, 2), _rect(3, 0, 3, 2)]
    assert degenerate(rects) == [1]


def test_empty_tiling():
    report = validate_tiling([])
    assert report["valid"]
    assert report["union_area"] == 0.0
