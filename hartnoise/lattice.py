from __future__ import annotations

import math

from .compose import FieldOps
from .core import Position


class LatticeNoise(FieldOps):
    """Checkerboard over integer cells, shifted by a seed-derived parity.

    Cheap enough to exercise the render pipeline without paying for a real
    noise algorithm. Always returns exactly 0.0 or 1.0.
    """

    def __init__(self, seed: bytes | str = b""):
        if isinstance(seed, str):
            seed = seed.encode("utf-8")
        self.bias = sum(bytes(seed))

    def sample(self, p: Position) -> float:
        cell_sum = math.floor(p.x) + math.floor(p.y) + self.bias
        return 1.0 if cell_sum % 2 == 0 else 0.0

    def __repr__(self) -> str:
        return f"LatticeNoise(bias={self.bias})"
