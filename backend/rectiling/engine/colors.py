"""Colour mapping — rectangle dimensions to a display colour."""

from __future__ import annotations

import math
from typing import NamedTuple

WHITE = "#ffffff"


class RGB(NamedTuple):
    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


def _clamp(value: float, lo: int = 0, hi: int = 255) -> int:
    return int(max(lo, min(hi, value)))


def _round_half_up(value: float) -> int:
    # Halves round up; round() would send them to the even neighbour
    return math.floor(value + 0.5)


def color_for(width: float, height: float, max_side: float) -> RGB:
    """Red grows with area, green shrinks with width, blue shrinks with height.

    ``max_side`` must be non-zero; validating it is the caller's job.
    """
    fw = abs(width)
    fh = abs(height)
    red = _clamp(_round_half_up(255 * fw * fh / (max_side * max_side)))
    green = _clamp(_round_half_up(255 - fw * 255 / max_side))
    blue = _clamp(_round_half_up(255 - fh * 255 / max_side))
    return RGB(red, green, blue)
