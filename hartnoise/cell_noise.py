from __future__ import annotations

import math

from .compose import FieldOps
from .core import Position
from .stream import DeterministicStream

# Neighbouring cells, self included.
OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, 1), (0, 1), (1, 1),
    (-1, 0), (0, 0), (1, 0),
    (-1, -1), (0, -1), (1, -1),
)

CELL_INDEX_BYTES = 8
_INDEX_MASK = (1 << (8 * CELL_INDEX_BYTES)) - 1


def cell_seed(ix: int, iy: int) -> bytes:
    """Fixed-width signed big-endian encoding of a cell's integer coordinates."""
    bx = (int(ix) & _INDEX_MASK).to_bytes(CELL_INDEX_BYTES, "big")
    by = (int(iy) & _INDEX_MASK).to_bytes(CELL_INDEX_BYTES, "big")
    return bx + by


class CellNoise(FieldOps):
    """Worley (cellular) noise: distance to the nearest per-cell feature point.

    Each integer cell owns one feature point, placed by forking the root stream
    on the cell coordinates. Nothing is cached; every sample forks the nine
    cells around the query point. Output lies in [0, 1].
    """

    def __init__(self, seed: bytes | str = b""):
        self.stream = DeterministicStream.with_seed(seed)

    def feature_point(self, ix: int, iy: int) -> Position:
        sub = self.stream.fork(cell_seed(ix, iy))
        fx = sub.random()
        fy = sub.random()
        return Position(fx, fy)

    def sample(self, p: Position) -> float:
        ix = math.floor(p.x)
        iy = math.floor(p.y)
        middle = Position(p.x - ix, p.y - iy)

        min_dist_sq = 1.0
        for off_x, off_y in OFFSETS:
            pt = self.feature_point(ix + off_x, iy + off_y) + Position(off_x, off_y)
            dist_sq = (pt - middle).len_sq()
            if dist_sq < min_dist_sq:
                min_dist_sq = dist_sq
        return math.sqrt(min_dist_sq)

    def __repr__(self) -> str:
        return "CellNoise()"
