import pytest

from hartnoise.cell_noise import CellNoise
from hartnoise.core import Position
from hartnoise.kinds import NoiseKind, make_noise
from hartnoise.lattice import LatticeNoise


def test_lattice_values_are_exactly_zero_or_one():
    n = LatticeNoise(b"any seed")
    vals = {n.sample(Position(x * 0.37, y * 0.53)) for x in range(-20, 20) for y in range(-20, 20)}
    assert vals == {0.0, 1.0}


def test_lattice_checkerboard_alternates():
    n = LatticeNoise(b"")
    assert n.sample(Position(0.5, 0.5)) == 1.0
    assert n.sample(Position(1.5, 0.5)) == 0.0
    assert n.sample(Position(1.5, 1.5)) == 1.0
    assert n.sample(Position(-0.5, 0.5)) == 0.0


def test_lattice_bias_from_seed():
    # ord("X") == 88 keeps parity, b"\x01" flips it.
    assert LatticeNoise("X").sample(Position(0.5, 0.5)) == 1.0
    assert LatticeNoise(b"\x01").sample(Position(0.5, 0.5)) == 0.0
    assert LatticeNoise(b"\x01\x01").bias == 2


def test_make_noise_kinds():
    assert isinstance(make_noise("worley", b"s"), CellNoise)
    assert isinstance(make_noise(NoiseKind.LATTICE, b"s"), LatticeNoise)


def test_make_noise_unknown_kind():
    with pytest.raises(ValueError):
        make_noise("perlin", b"s")
