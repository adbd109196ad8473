"""Shared test fixtures."""

from __future__ import annotations

import pytest

from rectiling.engine.config import TilingConfig
from rectiling.engine.grid import SeedRect
from rectiling.engine.presets import get_preset

# The six seed offsets every preset uses
SEED_OFFSETS = [(0, 1), (1, 1), (0, 0), (1, 0), (0, -1), (1, -1)]


def _by_parity(even: tuple[float, float], odd: tuple[float, float]) -> list[SeedRect]:
    seeds = []
    for x, y in SEED_OFFSETS:
        w, h = even if (x + y) % 2 == 0 else odd
        seeds.append(SeedRect(x, y, w, h))
    return seeds


# Every rectangle 5×5: the tiling is a plain square grid
UNIFORM_SEEDS = _by_parity((5, 5), (5, 5))

# Type-1 cells 4×2, type-2 cells 2×4: a pinwheel-style brick tiling
PINWHEEL_SEEDS = _by_parity((4, 2), (2, 4))

# Widths break a + b == c + d on the block anchored at the centre (14 should be 13)
INCONSISTENT_SEEDS = [
    SeedRect(0, 1, 10, 20),
    SeedRect(1, 1, 12, 16),
    SeedRect(0, 0, 9, 14),
    SeedRect(1, 0, 14, 13),
]


@pytest.fixture
def config() -> TilingConfig:
    return TilingConfig(cx=32, grid_width=8, max_side=20, max_iterations=100)


@pytest.fixture
def classic_seeds() -> list[SeedRect]:
    return get_preset("classic")


@pytest.fixture
def uniform_seeds() -> list[SeedRect]:
    return list(UNIFORM_SEEDS)


@pytest.fixture
def pinwheel_seeds() -> list[SeedRect]:
    return list(PINWHEEL_SEEDS)


@pytest.fixture
def inconsistent_seeds() -> list[SeedRect]:
    return list(INCONSISTENT_SEEDS)
