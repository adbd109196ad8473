"""Named seed sets. Each entry is (x, y, width, height) relative to the centre."""

from __future__ import annotations

from rectiling.engine.errors import UnknownPreset
from rectiling.engine.grid import SeedRect

PRESETS: dict[str, list[tuple[int, int, float, float]]] = {
    "classic": [
        (0, 1, 10, 20),
        (1, 1, 12, 16),
        (0, 0, 9, 14),
        (1, 0, 13, 13),
        (0, -1, 8, 9),
        (1, -1, 3, 10),
    ],
    "square": [
        (0, 1, 5, 5),
        (1, 1, 2, 2),
        (0, 0, 3, 3),
        (1, 0, 4, 4),
        (0, -1, 10, 10),
        (1, -1, 9, 9),
    ],
}


def preset_names() -> list[str]:
    return list(PRESETS)


def get_preset(name: str) -> list[SeedRect]:
    try:
        rows = PRESETS[name]
    except KeyError:
        raise UnknownPreset(f"Unknown preset '{name}'.") from None
    return [SeedRect(x, y, w, h) for x, y, w, h in rows]
