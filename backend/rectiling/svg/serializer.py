"""Write SVG markup for a generated tiling."""

from __future__ import annotations

from typing import Any

from rectiling.engine.colors import WHITE
from rectiling.engine.config import TilingConfig
from rectiling.engine.traversal import OutputRectangle
from rectiling.svg.layout import compute_layout

BACKGROUND = "#f6f8ff"
STROKE = "#000000"
LABEL_FILL = "#111111"
LABEL_FONT = "JetBrains Mono, monospace"
MIN_LABEL_SIZE = 12


def format_number(value: float) -> str:
    """Integral values without a trailing '.0'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float,
    canvas_h: float,
    background: str | None = None,
) -> str:
    """Generate SVG markup from element definitions.

    Each element is a dict with a ``tag``, optional ``text`` content and the
    remaining keys as attributes, in insertion order.
    """
    w = format_number(canvas_w)
    h = format_number(canvas_h)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}"'
        f' viewBox="0 0 {w} {h}">',
    ]

    if background:
        lines.append(f'  <rect width="100%" height="100%" fill="{background}" />')

    for elem in elements:
        tag = elem.get("tag", "rect")
        attrs = {k: v for k, v in elem.items() if k not in ("tag", "text")}
        attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        if "text" in elem:
            lines.append(f"  <{tag} {attr_str}>{elem['text']}</{tag}>")
        else:
            lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)


def rectangles_to_svg_dicts(
    rectangles: list[OutputRectangle],
    config: TilingConfig,
) -> list[dict[str, Any]]:
    """Convert positioned rectangles to <rect> (and optional <text>) elements."""
    layout = compute_layout(rectangles, config.canvas_size)
    stroke_width = format_number(config.edge_width)
    elements: list[dict[str, Any]] = []

    for rect in rectangles:
        x, y, width, height = layout.to_device(rect)
        elements.append({
            "tag": "rect",
            "x": f"{x:.3f}",
            "y": f"{y:.3f}",
            "width": f"{width:.3f}",
            "height": f"{height:.3f}",
            "fill": rect.fill if config.colorize else WHITE,
            "stroke": STROKE,
            "stroke-width": stroke_width,
        })
        if config.label:
            elements.append({
                "tag": "text",
                "x": f"{x + width / 2:.3f}",
                "y": f"{y + height / 2:.3f}",
                "font-family": LABEL_FONT,
                "font-size": format_number(max(MIN_LABEL_SIZE, height / 5)),
                "dominant-baseline": "middle",
                "text-anchor": "middle",
                "fill": LABEL_FILL,
                "text": f"{format_number(rect.width)},{format_number(rect.height)}",
            })

    return elements


def render_svg(rectangles: list[OutputRectangle], config: TilingConfig) -> str:
    """Full pipeline: positioned rectangles → SVG string."""
    elements = rectangles_to_svg_dicts(rectangles, config)
    return serialize_svg(elements, config.canvas_size, config.canvas_size, background=BACKGROUND)
