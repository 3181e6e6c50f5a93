from __future__ import annotations

from enum import Enum

from .cell_noise import CellNoise
from .lattice import LatticeNoise


class NoiseKind(str, Enum):
    WORLEY = "worley"
    LATTICE = "lattice"


def make_noise(kind: NoiseKind | str, seed: bytes | str = b"") -> CellNoise | LatticeNoise:
    try:
        kind = NoiseKind(kind)
    except ValueError:
        raise ValueError(f"unknown noise kind: {kind}") from None

    if kind is NoiseKind.WORLEY:
        return CellNoise(seed)
    return LatticeNoise(seed)
