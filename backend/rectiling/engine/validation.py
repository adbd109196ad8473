"""Tiling checks — positive extents and pairwise overlap of emitted rectangles."""

from __future__ import annotations

from shapely.geometry import Polygon, box
from shapely.ops import unary_union

from rectiling.engine.traversal import OutputRectangle


def to_polygon(rect: OutputRectangle) -> Polygon:
    return box(rect.left, rect.bottom, rect.right, rect.top)


def find_overlaps(
    rectangles: list[OutputRectangle],
    tolerance: float = 1e-9,
) -> list[tuple[int, int]]:
    """Index pairs whose intersection has positive area.

    Rectangles sharing only an edge or a corner do not count.
    """
    polys = [to_polygon(r) for r in rectangles]
    overlaps = []
    for i in range(len(polys)):
        for j in range(i + 1, len(polys)):
            if polys[i].intersection(polys[j]).area > tolerance:
                overlaps.append((i, j))
    return overlaps


def total_area(rectangles: list[OutputRectangle]) -> float:
    """Sum of individual areas (double-counts overlaps)."""
    return float(sum(to_polygon(r).area for r in rectangles))


def union_area(rectangles: list[OutputRectangle]) -> float:
    if not rectangles:
        return 0.0
    return float(unary_union([to_polygon(r) for r in rectangles]).area)


def degenerate(rectangles: list[OutputRectangle]) -> list[int]:
    """Indices of rectangles without right > left and top > bottom."""
    return [
        i for i, r in enumerate(rectangles)
        if not (r.right > r.left and r.top > r.bottom)
    ]


def validate_tiling(rectangles: list[OutputRectangle]) -> dict:
    """Summarise whether the rectangles form an exact, non-overlapping tiling."""
    overlaps = find_overlaps(rectangles)
    bad = degenerate(rectangles)
    issues: list[str] = []
    for i, j in overlaps:
        issues.append(f"rectangles {i} and {j} overlap")
    for i in bad:
        issues.append(f"rectangle {i} has non-positive extent")

    return {
        "valid": len(issues) == 0,
        "rectangle_count": len(rectangles),
        "total_area": total_area(rectangles),
        "union_area": union_area(rectangles),
        "issues": issues,
    }
