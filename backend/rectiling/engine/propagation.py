"""Propagation engine — derive unknown widths and heights from known neighbours.

A round runs three passes over the window of half-width H around the centre:

1. Diagonal extrapolation: along each diagonal, three consecutive cells form an
   arithmetic sequence, ``far = 2 * center - opposite``.
2. Horizontal-parity rule (widths): on every 2×2 block anchored at a type-1 cell,
   ``a + b == c + d`` with a=(i,j+1), b=(i+1,j+1), c=(i,j), d=(i+1,j).
3. Vertical-parity rule (heights): on every 2×2 block anchored at a type-2 cell,
   ``a + b == c + d`` with a=(i,j+1), b=(i,j), c=(i+1,j+1), d=(i+1,j).

No rule overwrites a known value. Rounds repeat until one adds nothing or the
iteration budget runs out.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Callable, Sequence

from rectiling.engine.config import ConflictPolicy, TilingConfig
from rectiling.engine.errors import InconsistentSeeds
from rectiling.engine.grid import HEIGHT, WIDTH, Conflict, TileGrid

logger = logging.getLogger(__name__)

Pass = Callable[[TileGrid, TilingConfig], bool]

_DIAGONALS = [(u, v) for u in (-1, 1) for v in (-1, 1)]

# Tolerance when comparing a derived dimension with a known one
REL_TOL = 1e-9
ABS_TOL = 1e-9


def _agrees(existing: float, derived: float) -> bool:
    return math.isclose(existing, derived, rel_tol=REL_TOL, abs_tol=ABS_TOL)


@dataclass
class PropagationReport:
    iterations: int = 0
    # False when the iteration budget ran out before a fixed point
    converged: bool = False
    conflicts: list[Conflict] = field(default_factory=list)


def _extrapolate(grid: TileGrid, i: int, j: int, u: int, v: int, dim: str, rule: str) -> bool:
    center = grid.cell(i, j)
    opp = grid.cell(i - u, j - v)
    far = grid.cell(i + u, j + v)
    if center is None or opp is None or far is None:
        return False
    if not opp.known(dim):
        return False
    derived = 2 * center.value(dim) - opp.value(dim)
    if far.known(dim):
        if not _agrees(far.value(dim), derived):
            grid.record_conflict(
                Conflict(rule, dim, i + u - grid.cx, j + v - grid.cy, far.value(dim), derived)
            )
        return False
    far.learn(dim, derived)
    return True


def _parallelogram(
    grid: TileGrid,
    dim: str,
    rule: str,
    a_pos: tuple[int, int],
    b_pos: tuple[int, int],
    c_pos: tuple[int, int],
    d_pos: tuple[int, int],
) -> bool:
    """Complete a block with ``a + b == c + d`` when exactly one value is missing."""
    a = grid.cell(*a_pos)
    b = grid.cell(*b_pos)
    c = grid.cell(*c_pos)
    d = grid.cell(*d_pos)
    if a is None or b is None or c is None or d is None:
        return False

    ka, kb, kc, kd = a.known(dim), b.known(dim), c.known(dim), d.known(dim)
    if ka and kb and kc and not kd:
        d.learn(dim, a.value(dim) + b.value(dim) - c.value(dim))
        return True
    if ka and kb and kd and not kc:
        c.learn(dim, a.value(dim) + b.value(dim) - d.value(dim))
        return True
    if ka and kc and kd and not kb:
        b.learn(dim, c.value(dim) + d.value(dim) - a.value(dim))
        return True
    if kb and kc and kd and not ka:
        a.learn(dim, c.value(dim) + d.value(dim) - b.value(dim))
        return True

    if ka and kb and kc and kd:
        derived = a.value(dim) + b.value(dim) - c.value(dim)
        if not _agrees(d.value(dim), derived):
            grid.record_conflict(
                Conflict(rule, dim, d_pos[0] - grid.cx, d_pos[1] - grid.cy, d.value(dim), derived)
            )
    return False


def diagonal_pass(grid: TileGrid, config: TilingConfig) -> bool:
    cx, cy, h = config.cx, config.cy, config.half_width
    added = False
    for i in range(cx - h, cx + h):
        for j in range(cy - h, cy + h):
            cell = grid.cell(i, j)
            if cell is None:
                continue
            if cell.width_known:
                for u, v in _DIAGONALS:
                    added = _extrapolate(grid, i, j, u, v, WIDTH, "diagonal") or added
            if cell.height_known:
                for u, v in _DIAGONALS:
                    added = _extrapolate(grid, i, j, u, v, HEIGHT, "diagonal") or added
    return added


def horizontal_pass(grid: TileGrid, config: TilingConfig) -> bool:
    cx, cy, h = config.cx, config.cy, config.half_width
    added = False
    for i in range(cx - h, cx + h + 1):
        for k in range(cy - h, cy + h + 1, 2):
            j = k + (i & 1)
            added = _parallelogram(
                grid, WIDTH, "horizontal", (i, j + 1), (i + 1, j + 1), (i, j), (i + 1, j)
            ) or added
    return added


def vertical_pass(grid: TileGrid, config: TilingConfig) -> bool:
    cx, cy, h = config.cx, config.cy, config.half_width
    added = False
    for i in range(cx - h, cx + h + 1):
        for k in range(cy - h + 1, cy + h + 1, 2):
            j = k + (i & 1)
            added = _parallelogram(
                grid, HEIGHT, "vertical", (i, j + 1), (i, j), (i + 1, j + 1), (i + 1, j)
            ) or added
    return added


DEFAULT_PASSES: tuple[Pass, ...] = (diagonal_pass, horizontal_pass, vertical_pass)


def propagation_round(
    grid: TileGrid,
    config: TilingConfig,
    passes: Sequence[Pass] = DEFAULT_PASSES,
) -> bool:
    """Run every pass once. True if any cell learned a new dimension."""
    added = False
    for run_pass in passes:
        added = run_pass(grid, config) or added
    return added


def propagate(
    grid: TileGrid,
    config: TilingConfig,
    passes: Sequence[Pass] = DEFAULT_PASSES,
) -> PropagationReport:
    """Iterate rounds to a fixed point or until ``config.max_iterations``.

    Hitting the budget is not an error: the grid keeps whatever it learned and
    the report says ``converged=False``. Under ``ConflictPolicy.STRICT`` the
    first round that records a conflict raises ``InconsistentSeeds``.
    """
    start = time.perf_counter()
    report = PropagationReport()

    while report.iterations < config.max_iterations:
        progress = propagation_round(grid, config, passes)
        if config.conflict_policy is ConflictPolicy.STRICT and grid.conflicts:
            raise InconsistentSeeds(list(grid.conflicts.values()))
        if not progress:
            report.converged = True
            break
        report.iterations += 1

    if not report.converged:
        logger.warning("Reached iteration limit; tiling may be incomplete.")

    report.conflicts = list(grid.conflicts.values())
    elapsed = (time.perf_counter() - start) * 1000
    logger.debug(
        "Propagation: %d rounds, %d known dimensions, %d conflicts in %.1fms",
        report.iterations,
        grid.known_count(),
        len(report.conflicts),
        elapsed,
    )
    return report
