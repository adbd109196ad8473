"""Grid state — the sparse 2D cell array one generation run owns.

Physical index (i, j) in [0, max_dim)²; logical offsets are relative to the
centre (cx, cy). Cells live in a flat row-major list addressed by
``i * max_dim + j``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from rectiling.engine.config import TilingConfig
from rectiling.engine.errors import InvalidSeed, SeedOutOfBounds

logger = logging.getLogger(__name__)

WIDTH = "width"
HEIGHT = "height"


@dataclass(frozen=True)
class Bounds:
    """Absolute edges of a positioned rectangle (y grows upwards)."""

    top: float
    right: float
    bottom: float
    left: float


@dataclass
class Cell:
    width: float = 0
    height: float = 0
    width_known: bool = False
    height_known: bool = False
    # None until the traversal positions the cell
    bounds: Bounds | None = None
    drawn: bool = False
    discovered: bool = False

    def known(self, dim: str) -> bool:
        return self.width_known if dim == WIDTH else self.height_known

    def value(self, dim: str) -> float:
        return self.width if dim == WIDTH else self.height

    def learn(self, dim: str, value: float) -> None:
        """Set a dimension and mark it known. Known flags never reset."""
        if dim == WIDTH:
            self.width = value
            self.width_known = True
        else:
            self.height = value
            self.height_known = True

    @property
    def drawable(self) -> bool:
        return self.width > 0 and self.height > 0


@dataclass(frozen=True)
class SeedRect:
    """Input rectangle at offset (x, y) from the grid centre."""

    x: int
    y: int
    width: float
    height: float


@dataclass(frozen=True)
class Conflict:
    """A rule found its target known with a different value than it derives."""

    rule: str
    dimension: str
    # Logical offset of the target cell
    x: int
    y: int
    existing: float
    derived: float

    @property
    def key(self) -> tuple[str, str, int, int]:
        return (self.rule, self.dimension, self.x, self.y)

    def describe(self) -> str:
        return (
            f"{self.rule} rule: {self.dimension} at ({self.x}, {self.y}) "
            f"is {self.existing}, derived {self.derived}"
        )

    def to_dict(self) -> dict:
        return {
            "rule": self.rule,
            "dimension": self.dimension,
            "x": self.x,
            "y": self.y,
            "existing": self.existing,
            "derived": self.derived,
        }


@dataclass
class TileGrid:
    """Square cell grid centred at (cx, cy)."""

    cx: int
    cy: int
    max_dim: int
    cells: list[Cell] = field(default_factory=list)
    # First-seen conflicts keyed by (rule, dimension, x, y), in detection order
    conflicts: dict[tuple[str, str, int, int], Conflict] = field(default_factory=dict)

    def cell(self, i: int, j: int) -> Cell | None:
        if i < 0 or j < 0 or i >= self.max_dim or j >= self.max_dim:
            return None
        return self.cells[i * self.max_dim + j]

    def at_offset(self, x: int, y: int) -> Cell | None:
        return self.cell(self.cx + x, self.cy + y)

    @property
    def center(self) -> Cell:
        return self.cells[self.cx * self.max_dim + self.cy]

    def record_conflict(self, conflict: Conflict) -> bool:
        """Store a conflict once. Returns True the first time it is seen."""
        if conflict.key in self.conflicts:
            return False
        self.conflicts[conflict.key] = conflict
        logger.warning("Inconsistent seeds — %s", conflict.describe())
        return True

    def known_count(self) -> int:
        return sum(int(c.width_known) + int(c.height_known) for c in self.cells)

    def snapshot(self) -> list[tuple[bool, float, bool, float]]:
        """Known flags and values of every cell, for comparing grid states."""
        return [
            (
                c.width_known,
                c.width if c.width_known else 0,
                c.height_known,
                c.height if c.height_known else 0,
            )
            for c in self.cells
        ]


def create_grid(config: TilingConfig) -> TileGrid:
    n = config.max_dim
    return TileGrid(
        cx=config.cx,
        cy=config.cy,
        max_dim=n,
        cells=[Cell() for _ in range(n * n)],
    )


def validate_seeds(seeds: Iterable[SeedRect]) -> list[SeedRect]:
    seeds = list(seeds)
    if not seeds:
        raise InvalidSeed("Seed set has no rectangles defined.")
    for rect in seeds:
        if rect.width <= 0 or rect.height <= 0:
            raise InvalidSeed("Seed rectangles must have positive width and height.")
    return seeds


def seed(grid: TileGrid, config: TilingConfig, seeds: Iterable[SeedRect]) -> None:
    """Write each seed's width and height into its cell, both marked known.

    Sign is the caller's concern (see ``validate_seeds``).
    """
    count = 0
    for rect in seeds:
        target = grid.cell(config.cx + rect.x, config.cy + rect.y)
        if target is None:
            raise SeedOutOfBounds(rect.x, rect.y)
        target.learn(WIDTH, rect.width)
        target.learn(HEIGHT, rect.height)
        count += 1
    logger.debug("Seeded %d rectangles into %dx%d grid", count, grid.max_dim, grid.max_dim)
