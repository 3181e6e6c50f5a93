from .cell_noise import CellNoise
from .compose import Invert, OctaveLayer, OctaveOptions, invert, octaves
from .core import ConfigurationError, NoiseField, Position, clamp01
from .kinds import NoiseKind, make_noise
from .lattice import LatticeNoise
from .stream import DeterministicStream

__all__ = [
    "CellNoise",
    "ConfigurationError",
    "DeterministicStream",
    "Invert",
    "LatticeNoise",
    "NoiseField",
    "NoiseKind",
    "OctaveLayer",
    "OctaveOptions",
    "Position",
    "clamp01",
    "invert",
    "make_noise",
    "octaves",
]
