"""Geometry traversal — turn the dimensioned grid into positioned rectangles.

Cells alternate between two parities. Each parity has four neighbour steps
(East, North, South, West); a step says which parity the neighbour has and how
its edges abut the current rectangle. The walk is a depth-first search over an
explicit stack of frames, each frame resuming at its own neighbour index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, NamedTuple

from rectiling.engine.colors import WHITE, color_for
from rectiling.engine.config import TilingConfig
from rectiling.engine.errors import EmptyResult, MissingCenterDimensions
from rectiling.engine.grid import Bounds, Cell, TileGrid

logger = logging.getLogger(__name__)

TYPE_1 = 1
TYPE_2 = 2


@dataclass(frozen=True)
class OutputRectangle:
    left: float
    right: float
    top: float
    bottom: float
    width: float
    height: float
    fill: str = WHITE

    def to_dict(self) -> dict:
        return {
            "left": self.left,
            "right": self.right,
            "top": self.top,
            "bottom": self.bottom,
            "width": self.width,
            "height": self.height,
            "fill": self.fill,
        }


# ── Neighbour placement: (neighbour cell, source bounds) -> neighbour bounds ──


def _t1_east(n: Cell, s: Bounds) -> Bounds:
    return Bounds(top=s.top, right=s.right + n.width, bottom=s.top - n.height, left=s.right)


def _t1_north(n: Cell, s: Bounds) -> Bounds:
    return Bounds(top=s.top + n.height, right=s.left + n.width, bottom=s.top, left=s.left)


def _t1_south(n: Cell, s: Bounds) -> Bounds:
    return Bounds(top=s.bottom, right=s.right, bottom=s.bottom - n.height, left=s.right - n.width)


def _t1_west(n: Cell, s: Bounds) -> Bounds:
    return Bounds(top=s.bottom + n.height, right=s.left, bottom=s.bottom, left=s.left - n.width)


def _t2_east(n: Cell, s: Bounds) -> Bounds:
    return Bounds(top=s.bottom + n.height, right=s.right + n.width, bottom=s.bottom, left=s.right)


def _t2_north(n: Cell, s: Bounds) -> Bounds:
    return Bounds(top=s.top + n.height, right=s.right, bottom=s.top, left=s.right - n.width)


def _t2_south(n: Cell, s: Bounds) -> Bounds:
    return Bounds(top=s.bottom, right=s.left + n.width, bottom=s.bottom - n.height, left=s.left)


def _t2_west(n: Cell, s: Bounds) -> Bounds:
    return Bounds(top=s.top, right=s.left, bottom=s.top - n.height, left=s.left - n.width)


class NeighborStep(NamedTuple):
    dx: int
    dy: int
    next_parity: int
    place: Callable[[Cell, Bounds], Bounds]


NEIGHBORS: dict[int, tuple[NeighborStep, ...]] = {
    TYPE_1: (
        NeighborStep(1, 0, TYPE_2, _t1_east),
        NeighborStep(0, 1, TYPE_2, _t1_north),
        NeighborStep(0, -1, TYPE_2, _t1_south),
        NeighborStep(-1, 0, TYPE_2, _t1_west),
    ),
    TYPE_2: (
        NeighborStep(1, 0, TYPE_1, _t2_east),
        NeighborStep(0, 1, TYPE_1, _t2_north),
        NeighborStep(0, -1, TYPE_1, _t2_south),
        NeighborStep(-1, 0, TYPE_1, _t2_west),
    ),
}


class Frame(NamedTuple):
    parity: int
    x: int
    y: int
    next_index: int = 0
    entered: bool = False


def _within_bounds(config: TilingConfig, x: int, y: int) -> bool:
    t = config.travel_half_width
    return (
        config.cx - t <= x <= config.cx + t
        and config.cy - t <= y <= config.cy + t
    )


def _emit(cell: Cell, config: TilingConfig) -> OutputRectangle:
    b = cell.bounds
    fill = color_for(cell.width, cell.height, config.max_side).hex if config.colorize else WHITE
    return OutputRectangle(
        left=b.left,
        right=b.right,
        top=b.top,
        bottom=b.bottom,
        width=cell.width,
        height=cell.height,
        fill=fill,
    )


def traverse(grid: TileGrid, config: TilingConfig) -> list[OutputRectangle]:
    """Position every reachable dimensioned cell, in discovery order.

    The centre rectangle is anchored at [0, width] × [0, height].
    """
    center = grid.center
    if not center.width_known or not center.height_known:
        raise MissingCenterDimensions()
    center.bounds = Bounds(top=center.height, right=center.width, bottom=0, left=0)
    center.discovered = True

    rectangles: list[OutputRectangle] = []
    stack = [Frame(TYPE_1, config.cx, config.cy)]

    while stack:
        frame = stack.pop()
        if not _within_bounds(config, frame.x, frame.y):
            continue
        cell = grid.cell(frame.x, frame.y)
        if cell is None:
            continue

        if not frame.entered:
            if not cell.drawn and cell.drawable:
                rectangles.append(_emit(cell, config))
                cell.drawn = True
            frame = frame._replace(entered=True)

        steps = NEIGHBORS[frame.parity]
        if frame.next_index >= len(steps):
            continue

        step = steps[frame.next_index]
        stack.append(frame._replace(next_index=frame.next_index + 1))

        nx, ny = frame.x + step.dx, frame.y + step.dy
        if not _within_bounds(config, nx, ny):
            continue
        neighbor = grid.cell(nx, ny)
        if neighbor is None or neighbor.drawn or neighbor.discovered:
            continue
        if not (neighbor.width_known and neighbor.height_known) or not neighbor.drawable:
            continue
        if neighbor.bounds is None:
            neighbor.bounds = step.place(neighbor, cell.bounds)
        neighbor.discovered = True
        stack.append(Frame(step.next_parity, nx, ny))

    if not rectangles:
        raise EmptyResult()

    logger.debug("Traversal emitted %d rectangles", len(rectangles))
    return rectangles
