"""Tiling error hierarchy.

Every failure of a generation run is a ``TilingError``. The ``kind`` string is
what the API reports back to clients.
"""

from __future__ import annotations


class TilingError(Exception):
    kind = "TilingError"


class InvalidConfiguration(TilingError):
    kind = "InvalidConfiguration"


class InvalidSeed(TilingError):
    kind = "InvalidSeed"


class UnknownPreset(TilingError):
    kind = "UnknownPreset"


class SeedOutOfBounds(TilingError):
    kind = "SeedOutOfBounds"

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Seed rectangle at offset ({x}, {y}) is outside the grid.")
        self.x = x
        self.y = y


class MissingCenterDimensions(TilingError):
    kind = "MissingCenterDimensions"

    def __init__(self) -> None:
        super().__init__("Central rectangle lacks both dimensions; check seeds.")


class EmptyResult(TilingError):
    kind = "EmptyResult"

    def __init__(self) -> None:
        super().__init__("No drawable rectangles were found; adjust parameters.")


class InconsistentSeeds(TilingError):
    """Raised under the strict conflict policy when two rules disagree."""

    kind = "InconsistentSeeds"

    def __init__(self, conflicts: list) -> None:
        first = conflicts[0]
        super().__init__(
            f"{len(conflicts)} inconsistent derivation(s); first: {first.describe()}"
        )
        self.conflicts = conflicts
