"""Generation configuration — validated once, immutable for the run."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from rectiling.engine.errors import InvalidConfiguration


class ConflictPolicy(str, enum.Enum):
    # Keep the first derived value, log the disagreement
    FIRST_WRITER = "first_writer"
    # Abort the run on the first disagreement
    STRICT = "strict"


@dataclass(frozen=True)
class TilingConfig:
    """Grid geometry, propagation budget and display flags for one run."""

    # Grid centre (physical index); the grid is 2*cx cells square
    cx: int = 32
    # Side of the propagation window; halved into half_width
    grid_width: int = 8
    # Colour scale reference
    max_side: float = 20.0
    # Display flags, consumed by the renderers only
    edge_width: float = 1.0
    colorize: bool = True
    label: bool = False
    canvas_size: int = 800
    # Propagation budget (rounds)
    max_iterations: int = 100
    conflict_policy: ConflictPolicy = ConflictPolicy.FIRST_WRITER

    @property
    def cy(self) -> int:
        return self.cx

    @property
    def half_width(self) -> int:
        return self.grid_width // 2

    @property
    def travel_half_width(self) -> int:
        return self.half_width - 1

    @property
    def max_dim(self) -> int:
        return 2 * self.cx

    def validate(self) -> TilingConfig:
        if self.cx % 4 != 0:
            raise InvalidConfiguration("cx must be a multiple of 4.")
        if self.grid_width % 2 != 0:
            raise InvalidConfiguration("Grid width must be even.")
        if self.grid_width >= self.cx:
            raise InvalidConfiguration("Grid width must be smaller than cx.")
        if self.cx <= 0 or self.grid_width <= 0:
            raise InvalidConfiguration("cx and grid width must be positive.")
        if self.max_side <= 0:
            raise InvalidConfiguration("Max side must be positive.")
        if self.max_iterations < 0:
            raise InvalidConfiguration("Max iterations cannot be negative.")
        if self.canvas_size <= 0:
            raise InvalidConfiguration("Canvas size must be positive.")
        return self


def suggest_grid_width(cx: int) -> int:
    """Default grid width offered when cx changes: cx - 4, at least 4, even."""
    proposed = max(4, cx - 4)
    return proposed - (proposed % 2)
